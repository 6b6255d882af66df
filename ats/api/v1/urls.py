from django.urls import path, include

from ats.users.api.v1.urls import auth_urlpatterns

app_name = 'api_v1'

urlpatterns = [
    # session authentication
    path('auth/', include(auth_urlpatterns)),

    # modules
    path('users/', include('ats.users.api.v1.urls')),
    path('', include('ats.recruitment.api.v1.urls')),
]
