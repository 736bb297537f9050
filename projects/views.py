# projects/views.py

from django.db import transaction
from django.db.models import Q
from rest_framework.generics import ListCreateAPIView, RetrieveUpdateDestroyAPIView
from rest_framework.response import Response
from rest_framework import status
from management.base_access_views import BaseProjectReadOwnerWriteView, PROJECT_NOT_FOUND
from users.utils import log_user_action, PROJECTS
from .serializers import *
from .models import *


# View for listing the projects of the current user and creating new ones
class ProjectListCreateView(ListCreateAPIView):

    def get_queryset(self):
        user = self.request.user

        return (
            Project.objects
            .filter(Q(owner=user) | Q(collaborators=user))
            .distinct()
            .select_related('owner')
            .prefetch_related('collaborators', 'tasks')
        )

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return CreateProjectSerializer
        return GetProjectSerializer


# View for reading, changing and deleting a single project
class ProjectDetailView(BaseProjectReadOwnerWriteView, RetrieveUpdateDestroyAPIView):
    queryset = Project.objects.select_related('owner').prefetch_related('collaborators', 'tasks')
    not_found_message = PROJECT_NOT_FOUND

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return ChangeProjectSerializer
        return GetProjectSerializer

    def put(self, request, *args, **kwargs):
        return self.partial_update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        project_name = instance.name

        with transaction.atomic():
            instance.tasks.all().delete()
            instance.delete()

        log_user_action(
            user=request.user,
            action_name=PROJECTS,
            description=f"Owner deleted project «{project_name}»"
        )

        return Response({'msg': 'Project deleted'}, status=status.HTTP_200_OK)
