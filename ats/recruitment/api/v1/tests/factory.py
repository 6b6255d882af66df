import factory
from factory.django import DjangoModelFactory

from ats.recruitment.constants import ACTIVE, FULL_TIME, NEW
from ats.recruitment.models import Job, Applicant
from ats.users.api.v1.tests.factory import UserFactory
from ats.users.constants import HIRING_MANAGER


class JobFactory(DjangoModelFactory):
    class Meta:
        model = Job

    title = factory.Faker('job')
    department = factory.Faker('word')
    location = factory.Faker('city')
    description = factory.Faker('paragraph')
    requirements = factory.Faker('paragraph')
    employment_type = FULL_TIME
    status = ACTIVE
    hiring_manager = factory.SubFactory(UserFactory, role=HIRING_MANAGER)
    recruiter = None


class ApplicantFactory(DjangoModelFactory):
    class Meta:
        model = Applicant

    job = factory.SubFactory(JobFactory)
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    email = factory.Sequence(lambda n: f'applicant{n}@email.com')
    phone_number = factory.Sequence(lambda n: '98%08d' % n)
    status = NEW
