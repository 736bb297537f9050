# users/signals.py

from django.db.models.signals import post_migrate
from django.dispatch import receiver
from .models import ActionType
from .utils import DEFAULT_ACTION_TYPES

@receiver(post_migrate)
def create_default_action_types(sender, **kwargs):
    for action in DEFAULT_ACTION_TYPES:
        ActionType.objects.get_or_create(name=action)
