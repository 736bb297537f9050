# management/base_access_views.py

from django.core.exceptions import ObjectDoesNotExist
from django.http import Http404
from rest_framework.exceptions import NotFound
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from .permissions import *

PROJECT_NOT_FOUND = 'Project not found.'
TASK_NOT_FOUND = 'Task not found.'


def get_object_or_not_found(queryset, pk, message):
    """
    Like get_object_or_404, but malformed ids are reported as missing too.
    """
    try:
        return queryset.get(pk=pk)
    except (ObjectDoesNotExist, TypeError, ValueError):
        raise NotFound(message)


class NotFoundMessageMixin:
    not_found_message = 'Not found.'

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message)


class BaseProjectAccessView(NotFoundMessageMixin, GenericAPIView):
    permission_classes = [IsAuthenticated, IsProjectMember]


class BaseProjectOwnerAccessView(NotFoundMessageMixin, GenericAPIView):
    permission_classes = [IsAuthenticated, IsProjectOwner]


class BaseProjectReadOwnerWriteView(NotFoundMessageMixin, GenericAPIView):
    permission_classes = [IsAuthenticated, IsProjectMemberReadOwnerWrite]
