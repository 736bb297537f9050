# management/apps.py

from django.apps import AppConfig


class ManagementConfig(AppConfig):
    name = 'management'
    verbose_name = 'Project membership'
