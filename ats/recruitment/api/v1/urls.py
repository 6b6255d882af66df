from rest_framework.routers import DefaultRouter

from .views.applicant import ApplicantViewSet, RecruiterViewSet
from .views.job import JobViewSet
from .views.stats import StatsViewSet

app_name = 'recruitment'

router = DefaultRouter()
router.include_root_view = False
router.register('jobs', JobViewSet, basename='jobs')
router.register('applicants', ApplicantViewSet, basename='applicants')
router.register('recruiter', RecruiterViewSet, basename='recruiter')
router.register('stats', StatsViewSet, basename='stats')

urlpatterns = router.urls
