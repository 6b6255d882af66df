from django.contrib.auth.base_user import BaseUserManager
from django.db.models import QuerySet

from .constants import ADMIN, RECRUITER


class UserQueryset(QuerySet):
    def recruiters(self):
        return self.filter(role=RECRUITER)

    def active_recruiters(self):
        return self.recruiters().filter(is_active=True)


class UserManager(BaseUserManager):

    def create_user(self, username, password=None, **extra_fields):
        extra_fields.setdefault('is_superuser', False)
        email = self.normalize_email(extra_fields.pop('email', ''))
        user = self.model(username=username, email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)

        return user

    def create_superuser(self, username, password, email, first_name='', last_name=''):
        return self.create_user(
            username=username,
            password=password,
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=ADMIN,
            is_superuser=True,
            is_active=True
        )

    def get_by_natural_key(self, username):
        return self.get(username=username)

    def get_queryset(self):
        return UserQueryset(self.model, using=self._db)

    def recruiters(self):
        return self.get_queryset().recruiters()

    def active_recruiters(self):
        return self.get_queryset().active_recruiters()
