import logging

from django.core.management import BaseCommand
from django.db import transaction

from ats.users.constants import ADMIN, HIRING_MANAGER, RECRUITER
from ats.users.models import User
from ats.users.utils import create_user

logger = logging.getLogger(__name__)

DEMO_USERS = (
    {
        'username': 'admin',
        'password': 'admin123',
        'first_name': 'Admin',
        'last_name': 'User',
        'email': 'admin@example.com',
        'role': ADMIN,
    },
    {
        'username': 'manager',
        'password': 'manager123',
        'first_name': 'Hiring',
        'last_name': 'Manager',
        'email': 'manager@example.com',
        'role': HIRING_MANAGER,
    },
    {
        'username': 'recruiter',
        'password': 'recruiter123',
        'first_name': 'Recruiter',
        'last_name': 'User',
        'email': 'recruiter@example.com',
        'role': RECRUITER,
    },
)


class Command(BaseCommand):
    help = "Create the admin, hiring manager and recruiter demo accounts"

    def handle(self, *args, **kwargs):
        with transaction.atomic():
            for data in DEMO_USERS:
                if User.objects.filter(username=data['username']).exists():
                    logger.info(f"Demo user {data['username']} already exists")
                    continue
                create_user(**data, is_active=True)
                logger.info(f"Created demo user {data['username']}")

        self.stdout.write("Demo users created successfully")
        self.stdout.write("All users in database:")
        for user in User.objects.order_by('id'):
            self.stdout.write(
                f"{user.id}\t{user.username}\t{user.full_name}\t{user.email}\t{user.role}"
            )
