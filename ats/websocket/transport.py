from channels.layers import get_channel_layer
from channels import DEFAULT_CHANNEL_LAYER

from .constants import REALTIME_MESSAGE, REALTIME_PROBE, REALTIME_TERMINATE


class ChannelLayerTransport:
    """
    Reaches a socket through the channel layer, using the consumer's
    channel name as the connection handle.
    """

    def __init__(self, alias=DEFAULT_CHANNEL_LAYER):
        self.alias = alias

    @property
    def layer(self):
        return get_channel_layer(self.alias)

    async def send(self, handle, message):
        await self.layer.send(handle, {
            'type': REALTIME_MESSAGE,
            'message': message
        })

    async def probe(self, handle):
        await self.layer.send(handle, {'type': REALTIME_PROBE})

    async def terminate(self, handle):
        await self.layer.send(handle, {'type': REALTIME_TERMINATE})
