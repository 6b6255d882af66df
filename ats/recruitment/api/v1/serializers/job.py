from django.contrib.auth import get_user_model
from rest_framework import serializers

from ats.core.mixins.serializers import DynamicFieldsModelSerializer
from ats.recruitment.models import Job
from ats.recruitment.utils.util import create_job, assign_recruiter
from ats.users.constants import RECRUITER

USER = get_user_model()


class JobSerializer(DynamicFieldsModelSerializer):
    hiring_manager = serializers.PrimaryKeyRelatedField(read_only=True)
    recruiter = serializers.PrimaryKeyRelatedField(
        queryset=USER.objects.all(),
        required=False,
        allow_null=True
    )

    class Meta:
        model = Job
        fields = (
            'id', 'title', 'department', 'location', 'description',
            'requirements', 'min_salary', 'max_salary', 'employment_type',
            'status', 'hiring_manager', 'recruiter', 'created_at', 'updated_at',
        )
        read_only_fields = ('created_at', 'updated_at')

    def validate_recruiter(self, recruiter):
        if recruiter and recruiter.role != RECRUITER:
            raise serializers.ValidationError("User is not a recruiter")
        return recruiter

    def validate(self, attrs):
        min_salary = attrs.get('min_salary', getattr(self.instance, 'min_salary', None))
        max_salary = attrs.get('max_salary', getattr(self.instance, 'max_salary', None))
        if min_salary is not None and max_salary is not None and min_salary > max_salary:
            raise serializers.ValidationError({
                'max_salary': ['Maximum salary must not be less than minimum salary.']
            })
        return attrs

    def create(self, validated_data):
        return create_job(**validated_data)

    def update(self, instance, validated_data):
        has_recruiter = 'recruiter' in validated_data
        recruiter = validated_data.pop('recruiter', None)
        instance = super().update(instance, validated_data)
        if has_recruiter and recruiter != instance.recruiter:
            instance = assign_recruiter(instance, recruiter)
        return instance


class RecruiterAssignSerializer(serializers.Serializer):
    recruiter_id = serializers.IntegerField()
