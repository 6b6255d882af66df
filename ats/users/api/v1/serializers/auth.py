from django.contrib.auth import authenticate
from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(
        error_messages={'blank': 'Username is required'}
    )
    password = serializers.CharField(
        style={'input_type': 'password'},
        trim_whitespace=False,
        error_messages={'blank': 'Password is required'}
    )

    def validate(self, attrs):
        user = authenticate(
            request=self.context.get('request'),
            username=attrs['username'],
            password=attrs['password']
        )
        if user is None:
            raise serializers.ValidationError("Invalid username or password")
        attrs['user'] = user
        return attrs
