from django.apps import AppConfig


class WebsocketConfig(AppConfig):
    name = 'ats.websocket'
    label = 'websocket'

    registry = None
    broadcaster = None
    notifier = None
    sweeper = None

    def ready(self):
        from ats.notification.notifier import DomainEventNotifier
        from .heartbeat import LivenessSweeper
        from .presence import PresenceBroadcaster
        from .registry import ConnectionRegistry
        from .transport import ChannelLayerTransport

        self.registry = ConnectionRegistry(ChannelLayerTransport())
        self.broadcaster = PresenceBroadcaster(self.registry)
        self.notifier = DomainEventNotifier(self.registry)
        self.sweeper = LivenessSweeper(self.registry)
