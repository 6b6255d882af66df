import asyncio
import logging

from django.conf import settings
from django.core.management import BaseCommand

from ats.users.constants import ROLES
from ats.websocket.client import NotificationStore, RealtimeClient

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Connect to the real-time server as a user and print the activity feed"

    def add_arguments(self, parser):
        parser.add_argument(
            '--url',
            default=settings.BACKEND_URL.replace('http', 'ws', 1) + '/ws',
            help='WebSocket url of the server'
        )
        parser.add_argument('--user-id', type=int, required=True)
        parser.add_argument('--role', choices=ROLES, required=True)

    def handle(self, *args, **options):
        store = NotificationStore(user_id=options['user_id'])
        store.subscribe(self.print_toast)
        client = RealtimeClient(
            options['url'], options['user_id'], options['role'], store=store
        )
        logger.info(
            f"Watching activity on {options['url']} as user {options['user_id']}"
        )
        try:
            asyncio.run(client.run())
        except KeyboardInterrupt:
            self.stdout.write("Stopped watching")

    def print_toast(self, message, toast):
        self.stdout.write(f"[{message['type']}] {toast.title}: {toast.description}")
