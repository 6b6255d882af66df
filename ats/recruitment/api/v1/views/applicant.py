from functools import partial

from django.conf import settings
from django.core.cache import cache
from django.db import transaction
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from ats.core.mixins.viewset_mixins import RetrieveUpdateDestroyViewSetMixin
from ats.permission.permission_classes import RecruiterPermission
from ats.recruitment.models import Applicant
from ats.recruitment.utils.cache import (
    invalidate_applicant_caches, recent_applicants_cache_key
)
from ats.recruitment.utils.status import CandidateStatusManager
from ..permissions import ApplicantPermission
from ..serializers.applicant import (
    ApplicantSerializer, ApplicantTransitionSerializer,
    ApplicantHoldSerializer, ApplicantNextStatusSerializer
)


class ApplicantViewSet(RetrieveUpdateDestroyViewSetMixin):
    """
    update:
    Update profile fields of the applicant. Status is changed through
    `transition` and `hold` only.

    next_statuses:
    Statuses the applicant may move to next and whether it can be put on
    hold.

    transition:
    Move the applicant to the next status.

        {"status": "screening", "notes": "Strong CV"}

    hold:
    Put the applicant on hold.

        {"notes": "Budget freeze"}
    """
    queryset = Applicant.objects.select_related('job')
    serializer_class = ApplicantSerializer
    permission_classes = [ApplicantPermission]
    status_manager_class = CandidateStatusManager

    def _invalidate(self, applicant):
        transaction.on_commit(
            partial(
                invalidate_applicant_caches,
                applicant.job_id,
                applicant.job.recruiter_id
            )
        )

    def perform_update(self, serializer):
        applicant = serializer.save()
        self._invalidate(applicant)

    def perform_destroy(self, instance):
        self._invalidate(instance)
        super().perform_destroy(instance)

    @action(methods=['get'], detail=True, url_path='next-statuses')
    def next_statuses(self, request, pk=None):
        return Response(
            ApplicantNextStatusSerializer(self.get_object()).data
        )

    @action(
        methods=['post'], detail=True,
        serializer_class=ApplicantTransitionSerializer
    )
    def transition(self, request, pk=None):
        applicant = self.get_object()
        serializer = ApplicantTransitionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        applicant = self.status_manager_class().transition(
            applicant.id,
            serializer.validated_data['status'],
            serializer.validated_data['notes']
        )
        return Response(ApplicantSerializer(applicant).data)

    @action(
        methods=['post'], detail=True,
        serializer_class=ApplicantHoldSerializer
    )
    def hold(self, request, pk=None):
        applicant = self.get_object()
        serializer = ApplicantHoldSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        applicant = self.status_manager_class().put_on_hold(
            applicant.id,
            serializer.validated_data['notes']
        )
        return Response(ApplicantSerializer(applicant).data)


class RecruiterViewSet(ViewSet):
    permission_classes = [RecruiterPermission]

    @action(methods=['get'], detail=False, url_path='recent-applicants')
    def recent_applicants(self, request):
        cache_key = recent_applicants_cache_key(request.user.id)
        data = cache.get(cache_key)
        if data is None:
            queryset = Applicant.objects.filter(
                job__recruiter=request.user
            ).order_by('-created_at')[:settings.RECENT_APPLICANTS_LIMIT]
            data = ApplicantSerializer(queryset, many=True).data
            cache.set(cache_key, data, settings.APPLICANT_LIST_CACHE_TIMEOUT)
        return Response(data)
