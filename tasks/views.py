# tasks/views.py

from django.db import transaction
from rest_framework.generics import ListCreateAPIView, RetrieveUpdateDestroyAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from management.base_access_views import *
from management.exceptions import MissingProjectId
from projects.models import Project
from users.utils import log_user_action, TASKS
from .serializers import *
from .models import *


# View for listing the tasks of a project and creating new ones
class TaskListCreateView(ListCreateAPIView):
    permission_classes = [IsAuthenticated, IsProjectMember]

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return CreateTaskSerializer
        return GetTaskSerializer

    def get_queryset(self):
        project_id = self.request.query_params.get('project')

        if not project_id:
            raise MissingProjectId()

        project = get_object_or_not_found(Project.objects.all(), project_id, PROJECT_NOT_FOUND)
        self.check_object_permissions(self.request, project)

        return Task.objects.filter(project=project).select_related('assigned_to', 'created_by')


# View for reading, changing and deleting a single task
class TaskDetailView(BaseProjectAccessView, RetrieveUpdateDestroyAPIView):
    queryset = Task.objects.select_related('project', 'assigned_to', 'created_by')
    not_found_message = TASK_NOT_FOUND

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return ChangeTaskSerializer
        return GetTaskSerializer

    def put(self, request, *args, **kwargs):
        return self.partial_update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        project = instance.project
        task_name = instance.name

        with transaction.atomic():
            instance.delete()
            project.touch()

        log_user_action(
            user=request.user,
            action_name=TASKS,
            description=f"User deleted task «{task_name}» from project «{project.name}»"
        )

        return Response({'msg': 'Task deleted'}, status=status.HTTP_200_OK)
