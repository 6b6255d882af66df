from ats.notification.decorators import notify_after_create
from ats.notification.utils import notify_user_created

from .models import User


@notify_after_create(notify_user_created)
def create_user(username, password=None, **data):
    return User.objects.create_user(username=username, password=password, **data)


def update_user(user, password=None, **data):
    for attr, value in data.items():
        setattr(user, attr, value)
    if password:
        user.set_password(password)
    user.save()
    return user
