"""
Publishers wired to the create operations through ``notify_after_create``.

They run from synchronous code (views, management commands), serialize the
created entity with the REST serializers and hand it to the notifier on the
event loop through ``async_to_sync``. A failure here never reaches the code
that created the entity.
"""
import logging

from asgiref.sync import async_to_sync

from ats.websocket.helpers import get_notifier

logger = logging.getLogger(__name__)


def notify_user_created(user):
    from ats.users.api.v1.serializers.user import UserSerializer
    try:
        delivered = async_to_sync(get_notifier().user_created)(
            UserSerializer(user).data
        )
    except Exception:
        logger.error(f"Could not notify creation of user {user.pk}", exc_info=True)
        return 0
    logger.debug(f"user_created for {user.pk} delivered to {delivered} connection(s)")
    return delivered


def notify_job_created(job):
    from ats.recruitment.api.v1.serializers.job import JobSerializer
    try:
        delivered = async_to_sync(get_notifier().job_created)(
            JobSerializer(job).data
        )
    except Exception:
        logger.error(f"Could not notify creation of job {job.pk}", exc_info=True)
        return 0
    logger.debug(f"job_created for {job.pk} delivered to {delivered} connection(s)")
    return delivered


def notify_applicant_created(applicant):
    from ats.recruitment.api.v1.serializers.applicant import ApplicantSerializer
    try:
        job = applicant.job
        delivered = async_to_sync(get_notifier().applicant_created)(
            ApplicantSerializer(applicant).data,
            job_id=job.id,
            job_title=job.title,
            hiring_manager_id=job.hiring_manager_id,
            recruiter_id=job.recruiter_id
        )
    except Exception:
        logger.error(
            f"Could not notify creation of applicant {applicant.pk}", exc_info=True
        )
        return 0
    logger.debug(
        f"applicant_created for {applicant.pk} delivered to {delivered} connection(s)"
    )
    return delivered
