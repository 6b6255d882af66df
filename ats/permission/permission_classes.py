from ats.permission.utils.factory import PermissionFactory
from ats.users.constants import RECRUITER, ROLES

permission_factory = PermissionFactory()

AnyRolePermission = permission_factory.build_permission(
    "AnyRolePermission",
    allowed_to=list(ROLES)
)

RecruiterPermission = permission_factory.build_permission(
    "RecruiterPermission",
    allowed_to=[RECRUITER]
)
