# projects/serializers.py

from rest_framework import serializers
from users.serializers import UserSummarySerializer
from users.utils import *
from .models import *


# Serializer for reading projects
class GetProjectSerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)
    collaborators = UserSummarySerializer(many=True, read_only=True)
    tasks = serializers.PrimaryKeyRelatedField(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Project
        fields = ['id', 'name', 'description', 'owner', 'collaborators', 'tasks', 'createdAt', 'updatedAt']


class ProjectWriteSerializer(serializers.ModelSerializer):
    name = serializers.CharField(
        max_length=150,
        error_messages={'blank': 'Project name is required.', 'required': 'Project name is required.'}
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Project
        fields = ['name', 'description']

    def validate_description(self, value):
        return value or ''

    def to_representation(self, instance):
        return GetProjectSerializer(instance, context=self.context).data


# Serializer for creating a project
class CreateProjectSerializer(ProjectWriteSerializer):
    def create(self, validated_data):
        owner = self.context['request'].user
        project = Project.objects.create(owner=owner, **validated_data)

        log_user_action(
            user=owner,
            action_name=PROJECTS,
            description=f"User created project «{project.name}»"
        )

        return project


# Serializer for changing a project. Only the keys present in the body are applied
class ChangeProjectSerializer(ProjectWriteSerializer):
    def update(self, instance, validated_data):
        fields_changed = False

        for field in validated_data:
            if getattr(instance, field) != validated_data[field]:
                fields_changed = True
                break

        if fields_changed:
            instance = super().update(instance, validated_data)

            log_user_action(
                user=self.context['request'].user,
                action_name=PROJECTS,
                description=f"Owner changed project «{instance.name}»"
            )

        return instance
