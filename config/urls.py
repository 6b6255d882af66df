from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def get_version_for_api(_):
    from . import VERSION
    return JsonResponse(
        {
            'version': ".".join(str(i) for i in VERSION[:3]),
            'status': VERSION[-1],
            'metaData': "+%s" % VERSION[3]
        }
    )


urlpatterns = [
    path('api/v1/version/', get_version_for_api, name='get_application_version'),
    path('dj-admin/', admin.site.urls),
    path('api-auth/', include('rest_framework.urls',
                              namespace='rest_framework')),

    # api urls
    path('api/v1/', include('ats.api.v1.urls')),
]
