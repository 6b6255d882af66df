from django.db import models

from ats.common.models import TimeStampedModel
from ats.recruitment.constants import APPLICANT_STATUS_CHOICES, NEW
from .job import Job


class Applicant(TimeStampedModel):
    job = models.ForeignKey(
        to=Job,
        on_delete=models.CASCADE,
        related_name='applicants'
    )
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    email = models.EmailField()
    phone_number = models.CharField(max_length=30, blank=True)
    current_company = models.CharField(max_length=255, blank=True)
    notice_period = models.CharField(max_length=100, blank=True)
    total_experience = models.CharField(max_length=100, blank=True)
    relevant_experience = models.CharField(max_length=100, blank=True)
    current_ctc = models.CharField(max_length=100, blank=True)
    expected_ctc = models.CharField(max_length=100, blank=True)
    resume = models.TextField(blank=True)

    # changed only through CandidateStatusManager once created
    status = models.CharField(
        max_length=30,
        choices=APPLICANT_STATUS_CHOICES,
        default=NEW,
        db_index=True
    )
    notes = models.TextField(blank=True)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self):
        return f"{self.full_name} - {self.get_status_display()}"
