class PermissionWithFilterMixin:
    """
    Lets the permission classes of a view scope its queryset by role.

    A permission built with ``filter_function`` exposes it as
    ``filter_queryset(request, view, queryset)``; every such permission is
    applied in turn, so e.g. a hiring manager listing jobs only sees the
    jobs they own::

        JobPermission = permission_factory.build_permission(
            "JobPermission",
            ...,
            filter_function=filter_jobs_by_role
        )
    """
    def get_queryset(self):
        queryset = super().get_queryset()
        for permission in self.get_permissions():
            role_filter = getattr(permission, 'filter_queryset', None)
            if role_filter is not None:
                queryset = role_filter(self.request, self, queryset)
        return queryset
