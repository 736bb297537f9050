# management/views.py

from rest_framework.response import Response
from rest_framework import status
from projects.models import Project
from users.serializers import UserSummarySerializer
from .base_access_views import BaseProjectOwnerAccessView, PROJECT_NOT_FOUND
from .serializers import *


# View for adding a collaborator to a project
class AddCollaboratorView(BaseProjectOwnerAccessView):
    queryset = Project.objects.all()
    serializer_class = AddCollaboratorSerializer
    not_found_message = PROJECT_NOT_FOUND

    def post(self, request, *args, **kwargs):
        project = self.get_object()

        context = self.get_serializer_context()
        context['project'] = project

        serializer = AddCollaboratorSerializer(data=request.data, context=context)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        return Response(
            {'msg': 'Collaborator added', 'user': UserSummarySerializer(user).data},
            status=status.HTTP_200_OK
        )


# View for removing a collaborator from a project
class RemoveCollaboratorView(BaseProjectOwnerAccessView):
    queryset = Project.objects.all()
    not_found_message = PROJECT_NOT_FOUND

    def delete(self, request, *args, **kwargs):
        project = self.get_object()

        try:
            user = project.collaborators.filter(pk=self.kwargs['user_id']).first()
        except (TypeError, ValueError):
            user = None

        # Removing someone who is not a collaborator changes nothing
        if user is not None:
            remove_collaborator(project, user, removed_by=request.user)

        return Response({'msg': 'Collaborator removed'}, status=status.HTTP_200_OK)
