from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.db import models
from django.utils.translation import gettext_lazy as _

from ..constants import ROLE_CHOICES, ADMIN, HIRING_MANAGER, RECRUITER
from ..managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    username = models.CharField(
        _('user username'), max_length=150, unique=True
    )
    email = models.EmailField(
        _('user email'), max_length=255, unique=True,
    )
    first_name = models.CharField(_('First Name'), max_length=150)
    last_name = models.CharField(_('Last Name'), max_length=150, blank=True)
    role = models.CharField(
        max_length=20, choices=ROLE_CHOICES, db_index=True
    )

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['email']

    class Meta:
        ordering = ('first_name', 'last_name')

    @property
    def full_name(self):
        appends = [self.first_name]
        if self.last_name:
            appends.append(self.last_name)
        return ' '.join(appends)

    @property
    def is_staff(self):
        return self.role == ADMIN

    @property
    def is_admin(self):
        return self.role == ADMIN

    @property
    def is_hiring_manager(self):
        return self.role == HIRING_MANAGER

    @property
    def is_recruiter(self):
        return self.role == RECRUITER

    def __str__(self):
        return f"{self.full_name or self.username}"
