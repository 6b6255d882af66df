import logging
from dataclasses import dataclass
from typing import Optional

from . import messages

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    handle: str
    user_id: Optional[int] = None
    role: Optional[str] = None
    is_alive: bool = True

    @property
    def is_bound(self):
        return self.user_id is not None and self.role is not None


class ConnectionRegistry:
    """
    Live real-time connections keyed by their transport handle, in the order
    they connected.

    All mutation happens on the event loop that serves the sockets. The
    coroutines below await the transport between steps, so every step looks
    the connection up again instead of trusting an earlier read.
    """

    def __init__(self, transport):
        self.transport = transport
        self._connections = {}

    def __len__(self):
        return len(self._connections)

    def __contains__(self, handle):
        return handle in self._connections

    def register(self, handle):
        connection = Connection(handle=handle)
        self._connections[handle] = connection
        return connection

    def bind_identity(self, handle, user_id, role):
        connection = self._connections.get(handle)
        if connection is None:
            return None
        connection.user_id = user_id
        connection.role = role
        connection.is_alive = True
        return connection

    def mark_alive(self, handle):
        connection = self._connections.get(handle)
        if connection is None:
            return None
        connection.is_alive = True
        return connection

    def get(self, handle):
        return self._connections.get(handle)

    def connections(self):
        return list(self._connections.values())

    def clear(self):
        self._connections.clear()

    async def broadcast(self, message, exclude=None, predicate=None):
        """
        Deliver `message` to every registered connection but `exclude` that
        satisfies `predicate`. A failed send is logged and skipped.

        :return: number of connections the message was handed to
        """
        delivered = 0
        for connection in self.connections():
            if connection.handle == exclude:
                continue
            if connection.handle not in self._connections:
                continue
            if predicate is not None and not predicate(connection):
                continue
            try:
                await self.transport.send(connection.handle, message)
            except Exception:
                logger.error(
                    f"Could not deliver {message.get('type')} to {connection.handle}",
                    exc_info=True
                )
                continue
            delivered += 1
        return delivered

    async def sweep(self):
        """
        One liveness cycle: connections that did not answer the previous
        probe are terminated and removed, everyone else is probed again.
        """
        reaped = probed = 0
        for connection in self.connections():
            if self._connections.get(connection.handle) is not connection:
                continue
            if not connection.is_alive:
                await self._reap(connection)
                reaped += 1
                continue

            connection.is_alive = False
            try:
                await self.transport.probe(connection.handle)
            except Exception:
                logger.debug(f"Probe to {connection.handle} failed", exc_info=True)
            probed += 1
        logger.debug(f"Sweep finished: {probed} probed, {reaped} reaped")
        return reaped

    async def remove(self, handle):
        connection = self._connections.pop(handle, None)
        if connection is None:
            return False
        if connection.is_bound:
            await self.broadcast(messages.user_offline(connection.user_id))
        return True

    async def _reap(self, connection):
        del self._connections[connection.handle]
        try:
            await self.transport.terminate(connection.handle)
        except Exception:
            logger.debug(
                f"Terminate of {connection.handle} failed", exc_info=True
            )
        logger.info(f"Connection {connection.handle} timed out")
        if connection.is_bound:
            await self.broadcast(messages.user_offline(connection.user_id))
