from django.urls import re_path

from .consumers.realtime import RealtimeConsumer

websocket_urlpatterns = [
    re_path(r'^ws/?$', RealtimeConsumer.as_asgi()),
]
