import logging

from . import messages

logger = logging.getLogger(__name__)


class PresenceBroadcaster:
    """Relays presence updates of a bound connection to every other one."""

    def __init__(self, registry):
        self.registry = registry

    async def relay_presence(self, sender_handle, status, action=None):
        sender = self.registry.get(sender_handle)
        if sender is None or not sender.is_bound:
            return 0

        message = messages.presence_update(
            sender.user_id, sender.role, status, action
        )
        delivered = await self.registry.broadcast(message, exclude=sender_handle)
        logger.debug(
            f"Presence {status} of user {sender.user_id} relayed to {delivered} connection(s)"
        )
        return delivered
