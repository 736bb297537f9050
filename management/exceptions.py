# management/exceptions.py

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import connections, transaction
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger('taskboard.errors')


class BadRequest(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request.'
    default_code = 'bad_request'


class Conflict(BadRequest):
    default_detail = 'The resource already exists.'
    default_code = 'conflict'


class DuplicateEmail(Conflict):
    default_detail = 'A user with this email already exists.'
    default_code = 'duplicate_email'


class AlreadyCollaborator(Conflict):
    default_detail = 'The user is already a collaborator.'
    default_code = 'already_collaborator'


class InvalidCredentials(BadRequest):
    default_detail = 'Invalid credentials.'
    default_code = 'invalid_credentials'


class OwnerCannotBeCollaborator(BadRequest):
    default_detail = 'The project owner cannot be added as a collaborator.'
    default_code = 'owner_cannot_be_collaborator'


class AssigneeNotMember(BadRequest):
    default_detail = 'The assigned user is not a member of the project.'
    default_code = 'assignee_not_member'


class MissingProjectId(BadRequest):
    default_detail = 'The project id is required.'
    default_code = 'missing_project_id'


class UserNotFound(exceptions.NotFound):
    default_detail = 'No user found with that email.'
    default_code = 'user_not_found'


def _first_message(detail):
    if isinstance(detail, dict):
        if 'detail' in detail:
            return _first_message(detail['detail'])
        for value in detail.values():
            return _first_message(value)
        return ''
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def flatten_validation_errors(detail, path=''):
    """
    Turns DRF's nested ValidationError detail into a flat list of
    {"path": ..., "msg": ...} entries.
    """
    errors = []

    if isinstance(detail, dict):
        for field, value in detail.items():
            field_path = f"{path}.{field}" if path else str(field)
            if field == 'non_field_errors':
                field_path = path
            errors.extend(flatten_validation_errors(value, field_path))
    elif isinstance(detail, list):
        for item in detail:
            errors.extend(flatten_validation_errors(item, path))
    else:
        errors.append({'path': path, 'msg': str(detail)})

    return errors


def keep_refusal_audit():
    """
    Undo the rollback mark DRF sets on a request-wide transaction.

    Refused requests ("Access denied", "Rejected") write their audit record
    before raising, and nothing else has been written by then: multi-row
    writes run in their own atomic blocks.
    """
    for db in connections.all():
        if db.settings_dict['ATOMIC_REQUESTS'] and db.in_atomic_block:
            transaction.set_rollback(False, using=db.alias)


def api_exception_handler(exc, context):
    """
    Project-wide DRF exception handler.

    Validation errors become {"errors": [...]}, every other API error becomes
    {"msg": "..."}. Anything DRF does not know how to render is logged and
    collapsed into a generic 500 without leaking details.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view',
            exc_info=exc
        )
        set_rollback()
        return Response(
            {'msg': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    keep_refusal_audit()

    if isinstance(exc, exceptions.ValidationError):
        response.data = {'errors': flatten_validation_errors(exc.detail)}
    elif isinstance(exc, (Http404, DjangoPermissionDenied)):
        response.data = {'msg': _first_message(response.data)}
    elif isinstance(exc, exceptions.APIException):
        response.data = {'msg': _first_message(exc.detail)}

    return response
