import logging
from collections import deque, namedtuple

from django.conf import settings
from django.utils import timezone

from ..constants import (
    CONNECTION, AUTH_SUCCESS, PING, PRESENCE_UPDATE, USER_OFFLINE,
    USER_CREATED, JOB_CREATED, APPLICANT_CREATED, OFFLINE
)

logger = logging.getLogger(__name__)

Toast = namedtuple('Toast', ['title', 'description'])

KNOWN_MESSAGE_TYPES = (
    CONNECTION, AUTH_SUCCESS, PING, PRESENCE_UPDATE, USER_OFFLINE,
    USER_CREATED, JOB_CREATED, APPLICANT_CREATED,
)


class NotificationStore:
    """
    Client side state fed by the real-time event stream.

    ``events``
        the most recent creation events, newest first, bounded by
        ``NOTIFICATION_HISTORY_LIMIT``
    ``presence``
        user id -> ``{"status": ..., "timestamp": ...}``
    ``activity``
        user id -> last reported action

    Listeners subscribed with :meth:`subscribe` are called with the message
    and a :class:`Toast` for every creation event and every presence update
    that carries an action from somebody else.
    """

    def __init__(self, history_limit=None, user_id=None):
        self.events = deque(
            maxlen=history_limit or settings.NOTIFICATION_HISTORY_LIMIT
        )
        self.presence = {}
        self.activity = {}
        self.user_id = user_id
        self._listeners = []

    def subscribe(self, listener):
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def dispatch(self, message):
        """
        Apply one server message to the store.

        :return: True if the message was understood
        """
        message_type = message.get('type') if isinstance(message, dict) else None
        if message_type not in KNOWN_MESSAGE_TYPES:
            logger.info(f"Unknown message type: {message_type}")
            return False
        getattr(self, f"on_{message_type}")(message)
        return True

    def on_connection(self, message):
        logger.debug("WebSocket server connection confirmed")

    def on_auth_success(self, message):
        logger.debug("WebSocket authentication successful")

    def on_ping(self, message):
        pass

    def on_presence_update(self, message):
        user_id = message.get('userId')
        if not user_id:
            return
        self.presence[user_id] = {
            'status': message.get('status'),
            'timestamp': message.get('timestamp'),
        }
        action = message.get('action')
        if action:
            self.activity[user_id] = action
            if user_id != self.user_id:
                self._notify(message, Toast(
                    'User Activity', f"{message.get('role')}: {action}"
                ))

    def on_user_offline(self, message):
        user_id = message.get('userId')
        if not user_id:
            return
        self.presence[user_id] = {
            'status': OFFLINE,
            'timestamp': timezone.now().isoformat(),
        }

    def on_user_created(self, message):
        user = message.get('user') or {}
        self._record(message, Toast(
            'New User Added',
            f"{user.get('first_name', '')} {user.get('last_name', '')} "
            f"joined as {user.get('role')}"
        ))

    def on_job_created(self, message):
        job = message.get('job') or {}
        self._record(message, Toast(
            'New Job Posted', f"New position: {job.get('title')}"
        ))

    def on_applicant_created(self, message):
        self._record(message, Toast(
            'New Applicant Added', f"New applicant for {message.get('jobTitle')}"
        ))

    def _record(self, message, toast):
        self.events.appendleft(message)
        self._notify(message, toast)

    def _notify(self, message, toast):
        for listener in list(self._listeners):
            try:
                listener(message, toast)
            except Exception:
                logger.error(
                    f"Listener failed for {message.get('type')}", exc_info=True
                )
