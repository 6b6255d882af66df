from types import SimpleNamespace

from django.test import SimpleTestCase

from ats.permission.utils.factory import PermissionFactory
from ats.permission.utils.views import PermissionWithFilterMixin
from ats.users.constants import ADMIN, HIRING_MANAGER, ROLES


def keep_own(self, request, view, queryset):
    return [item for item in queryset if item['owner'] == request.user.pk]


class BaseView:
    permission_classes = []

    def __init__(self, user, items):
        self.request = SimpleNamespace(user=user)
        self.items = items

    def get_queryset(self):
        return list(self.items)

    def get_permissions(self):
        return [permission() for permission in self.permission_classes]


class TestPermissionWithFilterMixin(SimpleTestCase):
    items = [{'id': 1, 'owner': 5}, {'id': 2, 'owner': 6}]

    def build_view(self, *permission_classes):
        class View(PermissionWithFilterMixin, BaseView):
            pass
        View.permission_classes = list(permission_classes)
        user = SimpleNamespace(pk=5, role=HIRING_MANAGER, is_authenticated=True)
        return View(user, self.items)

    def test_filtering_permission_scopes_queryset(self):
        permission = PermissionFactory().build_permission(
            "OwnItemsPermission",
            allowed_to=list(ROLES),
            filter_function=keep_own
        )
        view = self.build_view(permission)
        self.assertEqual(view.get_queryset(), [{'id': 1, 'owner': 5}])

    def test_permission_without_filter_keeps_queryset(self):
        permission = PermissionFactory().build_permission(
            "AdminOnlyPermission", allowed_to=[ADMIN]
        )
        view = self.build_view(permission)
        self.assertEqual(view.get_queryset(), self.items)
