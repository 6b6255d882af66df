from rest_framework.routers import DefaultRouter

from .views.auth import AuthViewSet
from .views.user import UserViewSet

app_name = 'users'

router = DefaultRouter()
router.include_root_view = False
router.register('', UserViewSet, basename='users')

urlpatterns = router.urls

auth_router = DefaultRouter()
auth_router.include_root_view = False
auth_router.register('', AuthViewSet, basename='auth')

auth_urlpatterns = (auth_router.urls, 'auth')
