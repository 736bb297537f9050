# tasks/serializers.py

from django.db import transaction
from rest_framework import serializers
from rest_framework.exceptions import PermissionDenied
from management.base_access_views import get_object_or_not_found, PROJECT_NOT_FOUND
from management.exceptions import AssigneeNotMember
from management.permissions import is_member, IsProjectMember
from users.serializers import UserSummarySerializer
from users.utils import *
from .models import *


# Serializer for reading tasks
class GetTaskSerializer(serializers.ModelSerializer):
    assignedTo = UserSummarySerializer(source='assigned_to', read_only=True)
    createdBy = UserSummarySerializer(source='created_by', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Task
        fields = ['id', 'name', 'description', 'status', 'priority', 'project',
                  'assignedTo', 'createdBy', 'createdAt', 'updatedAt']
        read_only_fields = ['project']


class TaskWriteSerializer(serializers.ModelSerializer):
    name = serializers.CharField(
        max_length=150,
        error_messages={'blank': 'Task name is required.', 'required': 'Task name is required.'}
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    assignedTo = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        source='assigned_to',
        required=False,
        allow_null=True,
        error_messages={'does_not_exist': 'Assigned user not found.'}
    )

    def validate_description(self, value):
        return value or ''

    def check_assignee(self, project, data):
        assignee = data.get('assigned_to')

        if assignee is not None and not is_member(project, assignee.id):
            log_user_action(
                user=self.context['request'].user,
                action_name=TASKS,
                description=f"User tried to assign a task to {assignee.email}, who is not a member of «{project.name}»",
                status=STATUS_REJECTED
            )
            raise AssigneeNotMember()

    def to_representation(self, instance):
        return GetTaskSerializer(instance, context=self.context).data


# Serializer for creating a task
class CreateTaskSerializer(TaskWriteSerializer):
    projectId = serializers.CharField(
        write_only=True,
        error_messages={'blank': 'Project id is required.', 'required': 'Project id is required.'}
    )

    class Meta:
        model = Task
        fields = ['name', 'description', 'priority', 'projectId', 'assignedTo']

    def validate(self, data):
        user = self.context['request'].user
        project = get_object_or_not_found(Project.objects.all(), data.pop('projectId'), PROJECT_NOT_FOUND)

        if not is_member(project, user.id):
            log_user_action(
                user=user,
                action_name=TASKS,
                description=f"User tried to add a task to «{project.name}» without being a project member",
                status=STATUS_ACCESS_DENIED
            )
            raise PermissionDenied(IsProjectMember.message)

        self.check_assignee(project, data)
        data['project'] = project

        return data

    def create(self, validated_data):
        user = self.context['request'].user

        with transaction.atomic():
            task = Task.objects.create(created_by=user, **validated_data)
            task.project.touch()

        log_user_action(
            user=user,
            action_name=TASKS,
            description=f"User created task «{task.name}» in project «{task.project.name}»"
        )

        return task


# Serializer for changing a task. Only the keys present in the body are applied
class ChangeTaskSerializer(TaskWriteSerializer):
    class Meta:
        model = Task
        fields = ['name', 'description', 'status', 'priority', 'assignedTo']

    def validate(self, data):
        self.check_assignee(self.instance.project, data)
        return data

    def update(self, instance, validated_data):
        fields_changed = False

        for field in validated_data:
            if getattr(instance, field) != validated_data[field]:
                fields_changed = True
                break

        if fields_changed:
            with transaction.atomic():
                instance = super().update(instance, validated_data)
                instance.project.touch()

            log_user_action(
                user=self.context['request'].user,
                action_name=TASKS,
                description=f"User changed task «{instance.name}»"
            )

        return instance
