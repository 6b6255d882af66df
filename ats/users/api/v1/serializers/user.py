from django.contrib.auth import get_user_model
from rest_framework import serializers

from ats.core.mixins.serializers import DynamicFieldsModelSerializer
from ....utils import create_user, update_user

USER = get_user_model()


class UserSerializer(DynamicFieldsModelSerializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(
        write_only=True, required=False, min_length=6,
        style={'input_type': 'password'}
    )

    class Meta:
        model = USER
        fields = (
            'id', 'username', 'password', 'email', 'first_name', 'last_name',
            'full_name', 'role', 'is_active', 'created_at',
        )
        read_only_fields = ('full_name', 'created_at')

    def validate_username(self, username):
        qs = USER.objects.filter(username=username)
        if self.instance:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("Username already exists")
        return username

    def validate(self, attrs):
        if not self.instance and not attrs.get('password'):
            raise serializers.ValidationError({
                'password': ['This field is required.']
            })
        return attrs

    def create(self, validated_data):
        return create_user(**validated_data)

    def update(self, instance, validated_data):
        return update_user(instance, **validated_data)
