from django.apps import apps


def _websocket_config():
    return apps.get_app_config('websocket')


def get_registry():
    return _websocket_config().registry


def get_broadcaster():
    return _websocket_config().broadcaster


def get_notifier():
    return _websocket_config().notifier


def get_sweeper():
    return _websocket_config().sweeper
