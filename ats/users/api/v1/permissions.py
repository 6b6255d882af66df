from ats.permission.utils.factory import PermissionFactory
from ats.users.constants import ADMIN, HIRING_MANAGER

permission_factory = PermissionFactory()

UserPermission = permission_factory.build_permission(
    "UserPermission",
    allowed_to=[ADMIN],
    limit_read_to=[ADMIN, HIRING_MANAGER]
)
