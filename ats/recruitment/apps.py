from django.apps import AppConfig


class RecruitmentConfig(AppConfig):
    name = 'ats.recruitment'
    label = 'recruitment'
