import asyncio
import json
import logging

import aiohttp
from django.conf import settings

from ..constants import (
    AUTH, PRESENCE, PONG, PING, AUTH_SUCCESS, ONLINE, OFFLINE
)
from .store import NotificationStore

logger = logging.getLogger(__name__)


class ConnectionState:
    (DISCONNECTED, CONNECTING, OPEN, AUTHENTICATED, CLOSING) = (
        'disconnected', 'connecting', 'open', 'authenticated', 'closing'
    )
    CONNECTED = (OPEN, AUTHENTICATED)


class RealtimeClient:
    """
    Real-time socket client for one signed in user.

    After the socket opens the client identifies itself, announces itself
    online and keeps repeating that announcement every
    ``heartbeat_interval`` seconds. Server pings are answered with a pong and
    every other frame is handed to the :class:`NotificationStore`.

    The client never reconnects on its own. Once :meth:`close` has run,
    a new :meth:`connect` is needed.
    """

    def __init__(self, url, user_id, role, store=None,
                 heartbeat_interval=None, session=None):
        self.url = url
        self.user_id = user_id
        self.role = role
        self.store = store or NotificationStore(user_id=user_id)
        self.heartbeat_interval = (
            heartbeat_interval or settings.WEBSOCKET_CLIENT_HEARTBEAT_INTERVAL
        )
        self.state = ConnectionState.DISCONNECTED

        self._session = session
        self._owns_session = session is None
        self._ws = None
        self._heartbeat = None
        self._offline_sent = False

    @property
    def is_connected(self):
        return self.state in ConnectionState.CONNECTED

    async def connect(self):
        if self.state != ConnectionState.DISCONNECTED:
            return
        self.state = ConnectionState.CONNECTING
        if self._session is None:
            self._session = aiohttp.ClientSession()
        try:
            self._ws = await self._session.ws_connect(self.url)
        except aiohttp.ClientError:
            logger.error(f"Could not connect to {self.url}", exc_info=True)
            await self._release_session()
            self.state = ConnectionState.DISCONNECTED
            raise

        self.state = ConnectionState.OPEN
        self._offline_sent = False
        logger.info(f"Connected to {self.url} as user {self.user_id}")

        await self.send({'type': AUTH, 'userId': self.user_id, 'role': self.role})
        await self.update_presence(ONLINE)
        self._heartbeat = asyncio.ensure_future(self._keep_online())

    async def run(self):
        """Connect and consume frames until the socket closes."""
        await self.connect()
        try:
            async for message in self._ws:
                if message.type == aiohttp.WSMsgType.TEXT:
                    await self.handle_text(message.data)
                elif message.type == aiohttp.WSMsgType.ERROR:
                    logger.error(
                        f"WebSocket error: {self._ws.exception()}"
                    )
                    break
        finally:
            await self.close()

    async def handle_text(self, text):
        try:
            message = json.loads(text)
        except ValueError:
            logger.warning(f"Dropping malformed frame: {text[:100]}")
            return

        message_type = message.get('type') if isinstance(message, dict) else None
        if message_type == PING:
            await self.send({'type': PONG})
        elif message_type == AUTH_SUCCESS:
            self.state = ConnectionState.AUTHENTICATED
            logger.info(f"Authenticated as user {self.user_id}")
        self.store.dispatch(message)

    async def update_presence(self, status, action=None):
        message = {'type': PRESENCE, 'status': status}
        if action:
            message['action'] = action
        await self.send(message)

    async def send(self, message):
        if self._ws is None or self._ws.closed:
            logger.debug(f"Socket not open, dropping {message.get('type')}")
            return False
        await self._ws.send_json(message)
        return True

    async def close(self):
        if self.state in (ConnectionState.DISCONNECTED, ConnectionState.CLOSING):
            return
        self.state = ConnectionState.CLOSING

        if self._heartbeat is not None:
            self._heartbeat.cancel()
            self._heartbeat = None

        if not self._offline_sent:
            self._offline_sent = True
            try:
                await self.update_presence(OFFLINE)
            except (aiohttp.ClientError, ConnectionError):
                logger.debug("Could not announce offline status", exc_info=True)

        if self._ws is not None:
            await self._ws.close()
            self._ws = None
        await self._release_session()

        self.state = ConnectionState.DISCONNECTED
        logger.info(f"Disconnected user {self.user_id} from {self.url}")

    async def _keep_online(self):
        while self.is_connected:
            await asyncio.sleep(self.heartbeat_interval)
            if not self.is_connected:
                break
            try:
                await self.update_presence(ONLINE)
            except (aiohttp.ClientError, ConnectionError):
                logger.warning("Heartbeat failed, stopping it", exc_info=True)
                break

    async def _release_session(self):
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

