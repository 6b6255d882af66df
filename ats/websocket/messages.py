"""
Frames exchanged over the real-time socket.

Inbound frames are validated with serializers keyed by their ``type``;
anything that does not validate raises :class:`MalformedMessage`. Outbound
frames are built by the functions below so every producer emits the same
shape.
"""
from django.utils import timezone
from rest_framework import serializers

from ats.users.constants import ROLE_CHOICES
from .constants import (
    AUTH, PRESENCE, PONG, CONNECTION, AUTH_SUCCESS, PRESENCE_UPDATE,
    USER_OFFLINE, PING, USER_CREATED, JOB_CREATED, APPLICANT_CREATED,
    PRESENCE_STATUS_CHOICES, CONNECTION_GREETING
)


class MalformedMessage(Exception):
    pass


class AuthMessageSerializer(serializers.Serializer):
    userId = serializers.IntegerField(min_value=1)
    role = serializers.ChoiceField(choices=ROLE_CHOICES)


class PresenceMessageSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=PRESENCE_STATUS_CHOICES)
    action = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )


class PongMessageSerializer(serializers.Serializer):
    pass


INBOUND_SERIALIZERS = {
    AUTH: AuthMessageSerializer,
    PRESENCE: PresenceMessageSerializer,
    PONG: PongMessageSerializer,
}


def parse_inbound(content):
    """
    :param content: decoded JSON frame
    :return: tuple of message type and validated data
    :raises MalformedMessage: when the frame is not a known, valid message
    """
    if not isinstance(content, dict):
        raise MalformedMessage("Message must be a JSON object")

    message_type = content.get('type')
    serializer_class = INBOUND_SERIALIZERS.get(message_type)
    if serializer_class is None:
        raise MalformedMessage(f"Unknown message type `{message_type}`")

    serializer = serializer_class(data=content)
    if not serializer.is_valid():
        raise MalformedMessage(
            f"Invalid `{message_type}` message: {dict(serializer.errors)}"
        )
    return message_type, dict(serializer.validated_data)


def connection(message=CONNECTION_GREETING):
    return {'type': CONNECTION, 'message': message}


def auth_success(user_id, role):
    return {'type': AUTH_SUCCESS, 'userId': user_id, 'role': role}


def presence_update(user_id, role, status, action=None, timestamp=None):
    message = {
        'type': PRESENCE_UPDATE,
        'userId': user_id,
        'role': role,
        'status': status,
        'timestamp': (timestamp or timezone.now()).isoformat(),
    }
    if action:
        message['action'] = action
    return message


def user_offline(user_id):
    return {'type': USER_OFFLINE, 'userId': user_id}


def ping():
    return {'type': PING}


def user_created(user):
    return {'type': USER_CREATED, 'user': user}


def job_created(job):
    return {'type': JOB_CREATED, 'job': job}


def applicant_created(applicant, job_id, job_title):
    return {
        'type': APPLICANT_CREATED,
        'applicant': applicant,
        'jobId': job_id,
        'jobTitle': job_title,
    }
