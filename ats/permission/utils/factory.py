import logging
from types import FunctionType

from rest_framework.permissions import SAFE_METHODS, BasePermission

from ats.core.utils.common_utils import nested_getattr
from ats.users.constants import ROLES

logger = logging.getLogger(__name__)


class RolePermissionBase(BasePermission):
    """Base for every class built by :class:`PermissionFactory`"""
    description = {}

    def check_method_permission(self, request, view):
        return True

    def check_action_permission(self, request, view):
        return True

    @staticmethod
    def has_role(request, roles):
        return getattr(request.user, 'role', None) in roles


class PermissionFactory:
    description = {}

    def __init__(self,
                 allowed_to=None,
                 limit_read_to=None,
                 limit_write_to=None,
                 limit_edit_to=None,
                 methods=None,
                 actions=None,
                 allowed_user_fields=None,
                 messages=None,
                 filter_function=None):
        """
        Initialize permission_factory with default role permissions.

        These permissions will be used if not passed in build_permission

        :param allowed_to: list of roles for all methods
        :type allowed_to: list

        :param limit_read_to: list of roles for safe methods
            [get, options, head]
        :type limit_read_to: list

        :param limit_write_to: list of roles for create and update
            i.e other methods than safe methods
        :type limit_write_to: list

        :param limit_edit_to: list of roles for update methods
        :type limit_edit_to: list

        :param methods: method level roles
            eg.
            {
                "get": [ADMIN, HIRING_MANAGER],
                "post": [ADMIN]
                ...
            }
        :type methods: dict

        :param actions: action level roles, handy for custom actions
            eg.
            {
                "assign": [HIRING_MANAGER],
                "transition": [RECRUITER]
            }
        :type actions: dict

        :param allowed_user_fields: role keyed field names that determine the
            users allowed to touch an object. A role missing from the mapping
            is not restricted at object level.
            eg. For a job,
            {
                HIRING_MANAGER: ["hiring_manager"],
                RECRUITER: ["recruiter"]
            }
            For an applicant, ["job.hiring_manager"] and ["job.recruiter"]
        :type allowed_user_fields: dict

        :param messages: role keyed messages used when the object level
            check fails. A message can be split in {"read": ..., "write": ...}
        :type messages: dict

        :param filter_function: filter function to be applied in get_queryset
        :type filter_function: FunctionType
        """
        self.allowed_to = self.parse_permissions(allowed_to)
        self.limit_read_to = self.parse_permissions(limit_read_to)
        self.limit_write_to = self.parse_permissions(limit_write_to)
        self.limit_edit_to = self.parse_permissions(limit_edit_to)

        if methods:
            assert isinstance(methods, dict)
            methods = {key: self.parse_permissions(value)
                       for key, value in methods.items()}
        self.methods = methods

        if actions:
            assert isinstance(actions, dict)
            actions = {key: self.parse_permissions(value)
                       for key, value in actions.items()}
        self.actions = actions
        self.allowed_user_fields = allowed_user_fields
        self.messages = messages

        if filter_function:
            assert isinstance(filter_function, FunctionType)
        self.filter_function = filter_function

    def build_permission(self, name,
                         allowed_to=None,
                         limit_read_to=None,
                         limit_write_to=None,
                         limit_edit_to=None,
                         methods=None,
                         actions=None,
                         allowed_user_fields=None,
                         messages=None,
                         filter_function=None):
        """
        Create and return permission class with given configurations
        If nothing passed, default settings passed while creating constructor
        will be used.

        See :meth:`__init__` for the meaning of each argument.

        :param name: Name of the class
        :type name: str
        """
        self.description = {
            'r': {},
            'w': {},
            'rw': {},
            'e': {},
        }
        if allowed_to:
            self.description['rw'] = allowed_to
        if limit_read_to:
            self.description['r'] = limit_read_to
        if limit_write_to:
            self.description['w'] = limit_write_to
        if limit_edit_to:
            self.description['e'] = limit_edit_to

        allowed_to = self.parse_permissions(allowed_to) or self.allowed_to
        limit_read_to = self.parse_permissions(limit_read_to) or \
                        self.limit_read_to
        limit_write_to = self.parse_permissions(limit_write_to) or \
                         self.limit_write_to
        limit_edit_to = self.parse_permissions(limit_edit_to) or \
                        self.limit_edit_to

        if methods:
            assert isinstance(methods, dict)
            methods = {key: self.parse_permissions(value)
                       for key, value in methods.items()}
        methods = methods or self.methods

        if actions:
            assert isinstance(actions, dict)
            actions = {key: self.parse_permissions(value)
                       for key, value in actions.items()}
        actions = actions or self.actions

        allowed_user_fields = allowed_user_fields or self.allowed_user_fields
        messages = messages or self.messages or {}

        if filter_function:
            assert isinstance(filter_function, FunctionType)
        filter_function = filter_function or self.filter_function

        methods = self.get_methods(
            allowed_to, limit_read_to, limit_write_to, limit_edit_to, methods)

        attrs = {
            "has_permission": self.get_has_permission(),
            "check_method_permission": self.get_check_method_permission(
                methods),
            "has_object_permission": self.get_has_object_permission(
                allowed_user_fields=allowed_user_fields,
                messages=messages),
            "check_action_permission": self.get_check_action_permission(actions),
            "description": self.description
        }
        if filter_function:
            attrs.update({
                "filter_queryset": filter_function
            })
        return type(str(name), (RolePermissionBase,), attrs)

    @staticmethod
    def get_methods(allowed_to, limit_read_to,
                    limit_write_to, limit_edit_to, methods):
        """
        Parse other parameters and return method level permissions
        if methods is set, it will replace others.
        """
        http_method_names = ['get', 'post', 'put', 'patch', 'delete', 'head',
                             'options', 'trace']
        safe_methods = {method.lower() for method in SAFE_METHODS}
        writable_methods = set(http_method_names) - safe_methods
        permission_methods = {}

        if allowed_to:
            for method in http_method_names:
                permission_methods.update({method: allowed_to})

        if limit_read_to:
            for method in safe_methods:
                permission_methods.update({method: limit_read_to})

        if limit_write_to:
            for method in writable_methods:
                permission_methods.update({method: limit_write_to})

        if limit_edit_to:
            edit_methods = writable_methods - {'post'}
            for method in edit_methods:
                permission_methods.update({method: limit_edit_to})

        if methods:
            permission_methods.update(methods)

        return permission_methods

    @staticmethod
    def parse_permissions(permissions):
        """
        Parse role codes and return them as a set
        """
        if not permissions:
            return None
        if not isinstance(permissions, (list, tuple, set)):
            permissions = [permissions]

        for permission in permissions:
            assert permission in ROLES, f"Unknown role `{permission}`"
        return set(permissions)

    @staticmethod
    def get_has_permission():
        """Build and return has_permission method for permission"""

        def has_permission(self, request, view):
            if not (request.user and request.user.is_authenticated):
                return False
            if hasattr(view, 'action'):
                return self.check_method_permission(request, view) and \
                       self.check_action_permission(request, view)
            return self.check_method_permission(request, view)

        return has_permission

    @staticmethod
    def get_check_method_permission(methods):
        """build and return check_method_permission method
         which will be called from has_permission"""

        def check_method_permission(self, request, view):
            roles = methods.get(request.method.lower(), None)
            if roles:
                return self.has_role(request, roles)
            return True

        return check_method_permission

    @staticmethod
    def get_check_action_permission(actions):
        """
        Build check_action_permission method that checks roles for
        action.
        If action is None it will return True for all actions
        """
        if actions:
            def check_action_permission(self, request, view):
                roles = actions.get(view.action, None)
                if roles:
                    return self.has_role(request, roles)
                return True

            return check_action_permission
        else:
            # return method that returns True if there is no action
            return lambda x, y, z: True

    @staticmethod
    def get_has_object_permission(allowed_user_fields, messages):
        """
        Build has_object permission method for permission class and return it
        """

        def has_object_permission(self, request, view, obj):
            if not allowed_user_fields:
                return True
            role = getattr(request.user, 'role', None)
            field_names = allowed_user_fields.get(role)
            if field_names is None:
                return True

            for field_name in field_names:
                attribute = nested_getattr(obj, field_name, call=False)
                if attribute is None:
                    logger.debug(
                        "Attribute %s not found on %s", field_name, obj
                    )
                    continue
                if attribute == request.user:
                    return True

            message = messages.get(role)
            if isinstance(message, dict):
                message = message.get(
                    "read" if request.method in SAFE_METHODS else "write"
                )
            if message:
                self.message = message
            return False

        return has_object_permission
