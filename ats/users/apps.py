from django.apps import AppConfig


class UsersConfig(AppConfig):
    name = 'ats.users'
    label = 'users'
