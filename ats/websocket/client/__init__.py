from .store import NotificationStore  # noqa: F401
from .connection import RealtimeClient, ConnectionState  # noqa: F401
