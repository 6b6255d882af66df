from rest_framework import serializers

from ats.core.mixins.serializers import DynamicFieldsModelSerializer
from ats.recruitment.constants import APPLICANT_STATUS_CHOICES, APPLICANT_STATUS_LABELS
from ats.recruitment.models import Applicant
from ats.recruitment.utils.status_flow import permitted_next, can_put_on_hold
from ats.recruitment.utils.util import create_applicant


class ApplicantSerializer(DynamicFieldsModelSerializer):
    job = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Applicant
        fields = (
            'id', 'job', 'first_name', 'last_name', 'email', 'phone_number',
            'current_company', 'notice_period', 'total_experience',
            'relevant_experience', 'current_ctc', 'expected_ctc', 'resume',
            'status', 'notes', 'created_at', 'updated_at',
        )
        read_only_fields = ('status', 'created_at', 'updated_at')

    def create(self, validated_data):
        return create_applicant(**validated_data)


class ApplicantTransitionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=APPLICANT_STATUS_CHOICES)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class ApplicantHoldSerializer(serializers.Serializer):
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class ApplicantNextStatusSerializer(serializers.ModelSerializer):
    permitted_next = serializers.SerializerMethodField()
    can_put_on_hold = serializers.SerializerMethodField()

    class Meta:
        model = Applicant
        fields = ('id', 'status', 'permitted_next', 'can_put_on_hold')

    @staticmethod
    def get_permitted_next(instance):
        return [
            {'value': status, 'label': APPLICANT_STATUS_LABELS[status]}
            for status in permitted_next(instance.status)
        ]

    @staticmethod
    def get_can_put_on_hold(instance):
        return can_put_on_hold(instance.status)
