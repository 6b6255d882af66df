import logging
from functools import partial

from django.db import transaction

from ats.recruitment.constants import ON_HOLD
from ats.recruitment.exceptions import InvalidTransition
from ats.recruitment.models import Applicant
from .cache import invalidate_applicant_caches
from .status_flow import can_transition

logger = logging.getLogger(__name__)


class CandidateStatusManager:
    """
    Moves an applicant along the hiring pipeline.

    A move is accepted only when the target is one of the statuses the
    current status leads to, or when the target is ``on_hold`` and the
    current status is not terminal. The new status and notes are written
    under a row lock; notes replace whatever was stored before.

    Once the change commits, the job's applicant list and the assigned
    recruiter's recent applicant feed are invalidated.
    """

    def __init__(self, queryset=None):
        self.queryset = queryset

    def get_queryset(self):
        if self.queryset is None:
            return Applicant.objects.all()
        return self.queryset.all()

    def transition(self, applicant_id, target_status, notes=None):
        with transaction.atomic():
            applicant = self.get_queryset().select_for_update().get(
                pk=applicant_id
            )
            current_status = applicant.status
            if not can_transition(current_status, target_status):
                logger.info(
                    f"Rejected move of applicant {applicant_id} from "
                    f"{current_status} to {target_status}"
                )
                raise InvalidTransition(current_status, target_status)

            applicant.status = target_status
            applicant.notes = notes or ''
            applicant.save(update_fields=['status', 'notes', 'updated_at'])

            transaction.on_commit(
                partial(
                    invalidate_applicant_caches,
                    applicant.job_id,
                    applicant.job.recruiter_id
                )
            )

        logger.info(
            f"Applicant {applicant_id} moved from {current_status} to {target_status}"
        )
        return applicant

    def put_on_hold(self, applicant_id, notes=None):
        return self.transition(applicant_id, ON_HOLD, notes)
