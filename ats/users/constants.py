from django.utils.translation import gettext_lazy as _

# roles
(ADMIN, HIRING_MANAGER, RECRUITER) = ('admin', 'hiring_manager', 'recruiter')

ROLE_CHOICES = (
    (ADMIN, _('Admin')),
    (HIRING_MANAGER, _('Hiring Manager')),
    (RECRUITER, _('Recruiter')),
)

ROLES = (ADMIN, HIRING_MANAGER, RECRUITER)
