from django.conf import settings
from django.db import models

from ats.common.models import TimeStampedModel
from ats.recruitment.constants import (
    JOB_STATUS_CHOICES, ACTIVE, EMPLOYMENT_TYPE_CHOICES, FULL_TIME
)


class Job(TimeStampedModel):
    title = models.CharField(max_length=255)
    department = models.CharField(max_length=150)
    location = models.CharField(max_length=150)
    description = models.TextField()
    requirements = models.TextField()
    min_salary = models.PositiveIntegerField(null=True, blank=True)
    max_salary = models.PositiveIntegerField(null=True, blank=True)
    employment_type = models.CharField(
        max_length=50,
        choices=EMPLOYMENT_TYPE_CHOICES,
        default=FULL_TIME
    )
    status = models.CharField(
        max_length=20,
        choices=JOB_STATUS_CHOICES,
        default=ACTIVE,
        db_index=True
    )
    hiring_manager = models.ForeignKey(
        to=settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='managed_jobs'
    )
    # set through `assign_recruiter`
    recruiter = models.ForeignKey(
        to=settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_jobs'
    )

    def __str__(self):
        return f"{self.title} ({self.department})"
