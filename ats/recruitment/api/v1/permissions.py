from ats.permission.utils.factory import PermissionFactory
from ats.users.constants import ADMIN, HIRING_MANAGER, RECRUITER, ROLES

permission_factory = PermissionFactory()


def filter_jobs_by_role(self, request, view, queryset):
    if getattr(view, 'action', None) != 'list':
        return queryset
    role = request.user.role
    if role == HIRING_MANAGER:
        return queryset.filter(hiring_manager=request.user)
    if role == RECRUITER:
        return queryset.filter(recruiter=request.user)
    if role == ADMIN:
        return queryset
    return queryset.none()


JobPermission = permission_factory.build_permission(
    "JobPermission",
    limit_read_to=list(ROLES),
    limit_write_to=[HIRING_MANAGER],
    allowed_user_fields={
        HIRING_MANAGER: ['hiring_manager'],
        RECRUITER: ['recruiter'],
    },
    messages={
        HIRING_MANAGER: {
            'read': "You can only view your own jobs",
            'write': "You can only update your own jobs",
        },
        RECRUITER: "You can only view jobs assigned to you",
    },
    filter_function=filter_jobs_by_role
)

JobApplicantPermission = permission_factory.build_permission(
    "JobApplicantPermission",
    limit_read_to=list(ROLES),
    limit_write_to=[RECRUITER],
    allowed_user_fields={
        HIRING_MANAGER: ['hiring_manager'],
        RECRUITER: ['recruiter'],
    },
    messages={
        HIRING_MANAGER: "You can only view applicants for your own jobs",
        RECRUITER: {
            'read': "You can only view applicants for jobs assigned to you",
            'write': "You can only add applicants to jobs assigned to you",
        },
    }
)

ApplicantPermission = permission_factory.build_permission(
    "ApplicantPermission",
    limit_read_to=list(ROLES),
    limit_write_to=[RECRUITER],
    allowed_user_fields={
        HIRING_MANAGER: ['job.hiring_manager'],
        RECRUITER: ['job.recruiter'],
    },
    messages={
        HIRING_MANAGER: "You can only view applicants for your own jobs",
        RECRUITER: {
            'read': "You can only view applicants for jobs assigned to you",
            'write': "You can only update applicants for jobs assigned to you",
        },
    }
)
