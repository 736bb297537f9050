# management/serializers.py

from django.db import transaction
from rest_framework import serializers
from tasks.models import Task
from users.models import User
from users.utils import *
from .exceptions import AlreadyCollaborator, OwnerCannotBeCollaborator, UserNotFound


# Serializer for adding a collaborator to a project by email
class AddCollaboratorSerializer(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            'invalid': 'Collaborator email is invalid.',
            'required': 'Collaborator email is required.',
            'blank': 'Collaborator email is required.',
        }
    )

    def validate(self, data):
        project = self.context['project']
        requesting_user = self.context['request'].user
        email = data['email'].strip().lower()

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise UserNotFound()

        if project.owner_id == user.id:
            log_user_action(
                user=requesting_user,
                action_name=COLLABORATORS,
                description=f"Owner tried to add themselves as a collaborator of «{project.name}»",
                status=STATUS_REJECTED
            )
            raise OwnerCannotBeCollaborator()

        if project.collaborators.filter(pk=user.pk).exists():
            raise AlreadyCollaborator()

        data['user'] = user

        return data

    def create(self, validated_data):
        project = self.context['project']
        user = validated_data['user']

        with transaction.atomic():
            project.collaborators.add(user)
            project.touch()

        log_user_action(
            user=self.context['request'].user,
            action_name=COLLABORATORS,
            description=f"Owner added {user.email} to project «{project.name}»"
        )

        return user


def remove_collaborator(project, user, removed_by):
    """
    Removes a collaborator from the project and un-assigns the project's tasks
    that were assigned to them. Both changes happen in one transaction.
    """
    with transaction.atomic():
        project.collaborators.remove(user)
        unassigned = Task.objects.filter(project=project, assigned_to=user).update(assigned_to=None)
        project.touch()

    log_user_action(
        user=removed_by,
        action_name=COLLABORATORS,
        description=f"Owner removed {user.email} from project «{project.name}», {unassigned} task(s) un-assigned"
    )

    return unassigned
