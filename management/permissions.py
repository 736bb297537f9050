# management/permissions.py

from rest_framework.permissions import BasePermission, SAFE_METHODS
from tasks.models import Task
from users.utils import log_user_action, PROJECTS, TASKS, STATUS_ACCESS_DENIED


def _as_id(user_id):
    try:
        return int(user_id)
    except (TypeError, ValueError):
        return None


def is_owner(project, user_id):
    """
    Returns True when the user is the owner of the project.
    """
    user_id = _as_id(user_id)
    return user_id is not None and project.owner_id == user_id


def is_member(project, user_id):
    """
    A user is a member of a project when they are its owner
    or one of its collaborators.
    """
    user_id = _as_id(user_id)

    if user_id is None:
        return False

    if project.owner_id == user_id:
        return True

    return project.collaborators.filter(pk=user_id).exists()


def get_project(obj):
    """
    Returns the project a permission check is about: the object itself
    for projects, the parent project for tasks.
    """
    if isinstance(obj, Task):
        return obj.project
    return obj


def log_access_denied(request, obj, description):
    action_name = TASKS if isinstance(obj, Task) else PROJECTS
    log_user_action(
        user=request.user,
        action_name=action_name,
        description=description,
        status=STATUS_ACCESS_DENIED
    )


class IsProjectMember(BasePermission):
    """
    Allows access only to the owner and the collaborators of the project.
    """
    message = 'Access denied: you are not a member of this project.'

    def has_object_permission(self, request, view, obj):
        project = get_project(obj)

        if is_member(project, request.user.id):
            return True

        log_access_denied(request, obj, f"User requested {request.method} on «{obj}» without being a project member")
        return False


class IsProjectOwner(BasePermission):
    """
    Allows access only to the owner of the project.
    """
    message = 'Access denied: only the project owner can do this.'

    def has_object_permission(self, request, view, obj):
        project = get_project(obj)

        if is_owner(project, request.user.id):
            return True

        log_access_denied(request, obj, f"User requested {request.method} on «{project}» without being the owner")
        return False


class IsProjectMemberReadOwnerWrite(BasePermission):
    """
    Members may read the project, only the owner may change or delete it.
    """

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            permission = IsProjectMember()
        else:
            permission = IsProjectOwner()

        self.message = permission.message
        return permission.has_object_permission(request, view, obj)
