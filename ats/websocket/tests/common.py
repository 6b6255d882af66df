from ats.websocket.registry import ConnectionRegistry


class RecordingTransport:
    """Transport double that records what would have reached each socket."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.sent = []
        self.probed = []
        self.terminated = []

    async def send(self, handle, message):
        if handle in self.failing:
            raise ConnectionError(f"{handle} is gone")
        self.sent.append((handle, message))

    async def probe(self, handle):
        if handle in self.failing:
            raise ConnectionError(f"{handle} is gone")
        self.probed.append(handle)

    async def terminate(self, handle):
        self.terminated.append(handle)

    def received_by(self, handle):
        return [message for to, message in self.sent if to == handle]

    def of_type(self, message_type):
        return [
            (to, message) for to, message in self.sent
            if message['type'] == message_type
        ]


def build_registry(*identities, failing=()):
    """
    :param identities: ``(handle, user_id, role)`` tuples, ``user_id`` and
        ``role`` may be None for a connection that never authenticated
    """
    transport = RecordingTransport(failing=failing)
    registry = ConnectionRegistry(transport)
    for handle, user_id, role in identities:
        registry.register(handle)
        if user_id is not None:
            registry.bind_identity(handle, user_id, role)
    return registry, transport
