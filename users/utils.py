# users/utils.py

import logging

from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken
from .models import *

logger = logging.getLogger(__name__)

ACCOUNTS = "Accounts"
PROJECTS = "Projects"
COLLABORATORS = "Collaborators"
TASKS = "Tasks"

DEFAULT_ACTION_TYPES = [ACCOUNTS, PROJECTS, COLLABORATORS, TASKS]

STATUS_SUCCESS = 'Success'
STATUS_ACCESS_DENIED = 'Access denied'
STATUS_REJECTED = 'Rejected'


def log_user_action(user, action_name, description, status=STATUS_SUCCESS):
    """
    Records an action performed by a user in the UserAction table.
    """
    action_type, _ = ActionType.objects.get_or_create(name=action_name)

    UserAction.objects.create(
        type=action_type,
        user=user,
        description=description,
        status=status
    )

    logger.info("%s [%s] user=%s: %s", action_name, status, user.pk, description)


def issue_token(user):
    """
    Issues a signed bearer token for the user. The lifetime comes from
    SIMPLE_JWT['ACCESS_TOKEN_LIFETIME'] and there is no refresh token.
    """
    return str(AccessToken.for_user(user))


def verify_token(token):
    """
    Returns the user id embedded in a bearer token.
    Raises InvalidToken when the token is malformed, expired or badly signed.
    """
    try:
        access_token = AccessToken(token)
    except TokenError as exc:
        raise InvalidToken(str(exc))

    try:
        return access_token[api_settings.USER_ID_CLAIM]
    except KeyError:
        raise InvalidToken('Token contained no recognizable user identification')
