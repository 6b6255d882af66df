from rest_framework import mixins
from rest_framework.viewsets import GenericViewSet, ModelViewSet

from ats.permission.utils.views import PermissionWithFilterMixin


# with permission and filter standard views
class ATSModelViewSet(PermissionWithFilterMixin, ModelViewSet):
    pass


class RetrieveUpdateDestroyViewSetMixin(PermissionWithFilterMixin,
                                        mixins.RetrieveModelMixin,
                                        mixins.UpdateModelMixin,
                                        mixins.DestroyModelMixin,
                                        GenericViewSet):
    """
    A viewset that provides `retrieve`, `update`, and `destroy` actions.

    To use it, override the class and set the `.queryset` and
    `.serializer_class` attributes.
    """
    pass
