import logging

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from .. import messages
from ..helpers import get_registry, get_broadcaster, get_sweeper
from ..messages import MalformedMessage, parse_inbound

logger = logging.getLogger(__name__)


class RealtimeConsumer(AsyncJsonWebsocketConsumer):
    """
    Presence and notification socket.

    Every inbound frame marks the connection alive for the liveness sweep;
    `pong` exists for clients that have nothing else to say.

    Register an inbound message type by defining `handle_(type)` and adding
    its serializer to `messages.INBOUND_SERIALIZERS`.

    Frames produced elsewhere reach this socket through the channel layer as
    `realtime.message`, `realtime.probe` and `realtime.terminate` events
    addressed to `self.channel_name`.
    """

    @property
    def registry(self):
        return get_registry()

    @property
    def broadcaster(self):
        return get_broadcaster()

    async def connect(self):
        await self.accept()
        self.registry.register(self.channel_name)
        get_sweeper().ensure_running()
        logger.info(f"Client connected to WebSocket: {self.channel_name}")
        await self.send_json(messages.connection())

    async def receive(self, text_data=None, bytes_data=None, **kwargs):
        # any frame from the peer answers the last probe
        self.registry.mark_alive(self.channel_name)
        if text_data is None:
            logger.warning(f"Dropped binary frame on {self.channel_name}")
            return
        try:
            content = await self.decode_json(text_data)
        except ValueError:
            logger.warning(f"Dropped invalid JSON on {self.channel_name}")
            return
        await self.receive_json(content, **kwargs)

    async def receive_json(self, content, **kwargs):
        try:
            message_type, data = parse_inbound(content)
        except MalformedMessage as e:
            logger.warning(f"Dropped message on {self.channel_name}: {e}")
            return
        await getattr(self, f"handle_{message_type}")(data)

    async def disconnect(self, code):
        removed = await self.registry.remove(self.channel_name)
        if removed:
            logger.info(f"Client disconnected from WebSocket: {self.channel_name}")

    # command handlers
    async def handle_auth(self, data):
        user_id, role = data['userId'], data['role']

        session_user = self.scope.get('user')
        if session_user is not None and session_user.is_authenticated and (
            session_user.pk != user_id or session_user.role != role
        ):
            logger.warning(
                f"Refused auth as user {user_id} ({role}) from session of "
                f"user {session_user.pk} on {self.channel_name}"
            )
            return

        self.registry.bind_identity(self.channel_name, user_id, role)
        logger.info(f"User authenticated: {user_id}, role: {role}")
        await self.send_json(messages.auth_success(user_id, role))

    async def handle_presence(self, data):
        await self.broadcaster.relay_presence(
            self.channel_name, data['status'], data.get('action')
        )

    async def handle_pong(self, data):
        self.registry.mark_alive(self.channel_name)

    # channel layer events
    async def realtime_message(self, event):
        await self.send_json(event['message'])

    async def realtime_probe(self, event):
        await self.send_json(messages.ping())

    async def realtime_terminate(self, event):
        await self.close()
