from functools import partial

from django.db import transaction

from ats.notification.decorators import notify_after_create
from ats.notification.utils import notify_job_created, notify_applicant_created
from ats.recruitment.models import Job, Applicant
from .cache import invalidate_applicant_caches, invalidate_recent_applicants


@notify_after_create(notify_job_created)
def create_job(**data):
    return Job.objects.create(**data)


@notify_after_create(notify_applicant_created)
def create_applicant(**data):
    applicant = Applicant.objects.create(**data)
    transaction.on_commit(
        partial(
            invalidate_applicant_caches,
            applicant.job_id,
            applicant.job.recruiter_id
        )
    )
    return applicant


def assign_recruiter(job, recruiter):
    """
    Assign `recruiter` to `job`. The recent applicant feed of both the
    previous and the new recruiter changes with it.
    """
    previous_recruiter_id = job.recruiter_id
    job.recruiter = recruiter
    job.save(update_fields=['recruiter', 'updated_at'])
    transaction.on_commit(
        partial(
            invalidate_recent_applicants,
            previous_recruiter_id,
            recruiter.id if recruiter else None
        )
    )
    return job
