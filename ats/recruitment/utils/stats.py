from django.contrib.auth import get_user_model
from django.db.models import Count, Q

from ats.recruitment.constants import (
    ACTIVE, INTERVIEW_STATUSES, CLOSED_APPLICANT_STATUSES
)
from ats.recruitment.models import Job, Applicant

USER = get_user_model()


def get_admin_stats():
    return {
        'totalUsers': USER.objects.count(),
        'openJobs': Job.objects.filter(status=ACTIVE).count(),
        'activeRecruiters': USER.objects.active_recruiters().count(),
        'totalApplicants': Applicant.objects.count(),
    }


def get_hiring_manager_stats(hiring_manager):
    jobs = Job.objects.filter(hiring_manager=hiring_manager)
    return {
        'myJobPostings': jobs.count(),
        'assignedRecruiters': jobs.filter(
            recruiter__isnull=False
        ).aggregate(
            count=Count('recruiter', distinct=True)
        )['count'],
        'totalApplicants': Applicant.objects.filter(job__in=jobs).count(),
    }


def get_recruiter_stats(recruiter):
    applicant_counts = Applicant.objects.filter(
        job__recruiter=recruiter
    ).aggregate(
        active=Count('id', filter=~Q(status__in=CLOSED_APPLICANT_STATUSES)),
        interviews=Count('id', filter=Q(status__in=INTERVIEW_STATUSES))
    )
    return {
        'assignedJobs': Job.objects.filter(recruiter=recruiter).count(),
        'activeApplicants': applicant_counts['active'],
        'interviewsScheduled': applicant_counts['interviews'],
    }
