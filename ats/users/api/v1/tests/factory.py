import factory
from django.contrib.auth import get_user_model
from factory.django import DjangoModelFactory

from ats.users.constants import RECRUITER

USER = get_user_model()


class UserFactory(DjangoModelFactory):
    """
    Users are created through the manager so the password gets hashed.

        UserFactory(role=HIRING_MANAGER, password='secret')
    """

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        manager = cls._get_manager(model_class)
        return manager.create_user(*args, **kwargs)

    class Meta:
        model = USER

    username = factory.Sequence(lambda n: f'user{n}')
    email = factory.Sequence(lambda n: f'email{n}@email.com')
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    password = 'defaultpassword'
    role = RECRUITER
    is_active = True
