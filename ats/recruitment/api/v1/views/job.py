import logging
from functools import partial

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.db import transaction
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response

from ats.core.mixins.viewset_mixins import ATSModelViewSet
from ats.recruitment.models import Job
from ats.recruitment.utils.cache import (
    applicant_list_cache_key, invalidate_applicant_caches
)
from ats.recruitment.utils.util import assign_recruiter
from ats.users.constants import RECRUITER
from ..permissions import JobPermission, JobApplicantPermission
from ..serializers.applicant import ApplicantSerializer
from ..serializers.job import JobSerializer, RecruiterAssignSerializer

USER = get_user_model()

logger = logging.getLogger(__name__)


class JobViewSet(ATSModelViewSet):
    """
    list:
    Admins see every job, hiring managers the jobs they own and recruiters
    the jobs assigned to them.

    create:
    Hiring managers create jobs they own. Connected clients are told about
    the new job.

    assign:
    Assign a recruiter to the job.

        {"recruiter_id": 9}

    applicants:
    GET lists the applicants of the job, POST adds one (assigned recruiter
    only).
    """
    queryset = Job.objects.select_related('hiring_manager', 'recruiter')
    serializer_class = JobSerializer
    permission_classes = [JobPermission]
    filterset_fields = ['status', 'department', 'employment_type']

    def perform_create(self, serializer):
        serializer.save(hiring_manager=self.request.user)

    def perform_destroy(self, instance):
        job_id, recruiter_id = instance.id, instance.recruiter_id
        super().perform_destroy(instance)
        transaction.on_commit(
            partial(invalidate_applicant_caches, job_id, recruiter_id)
        )

    @action(
        methods=['post'], detail=True,
        serializer_class=RecruiterAssignSerializer
    )
    def assign(self, request, pk=None):
        job = self.get_object()
        serializer = RecruiterAssignSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        recruiter = USER.objects.filter(
            pk=serializer.validated_data['recruiter_id']
        ).first()
        if recruiter is None:
            raise NotFound("Recruiter not found")
        if recruiter.role != RECRUITER:
            raise ValidationError("User is not a recruiter")

        job = assign_recruiter(job, recruiter)
        logger.info(f"Recruiter {recruiter.username} assigned to job {job.id}")
        return Response(JobSerializer(job).data)

    @action(
        methods=['get', 'post'], detail=True,
        permission_classes=[JobApplicantPermission],
        serializer_class=ApplicantSerializer
    )
    def applicants(self, request, pk=None):
        job = self.get_object()
        if request.method == 'GET':
            cache_key = applicant_list_cache_key(job.id)
            data = cache.get(cache_key)
            if data is None:
                data = ApplicantSerializer(
                    job.applicants.order_by('-created_at'), many=True
                ).data
                cache.set(cache_key, data, settings.APPLICANT_LIST_CACHE_TIMEOUT)
            return Response(data)

        serializer = ApplicantSerializer(
            data=request.data, context=self.get_serializer_context()
        )
        serializer.is_valid(raise_exception=True)
        serializer.save(job=job)
        return Response(serializer.data, status=status.HTTP_201_CREATED)
