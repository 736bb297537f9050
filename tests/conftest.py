"""Shared fixtures for the API and client tests."""

import itertools

import pytest
from rest_framework.test import APIClient

from projects.models import Project
from tasks.models import Task
from users.models import User
from users.utils import issue_token

PASSWORD = "secret123"


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    def _make_user(name=None, email=None, password=PASSWORD, is_active=True):
        n = next(counter)
        user = User(
            name=name or f"User {n}",
            email=email or f"user{n}@example.com",
            is_active=is_active,
        )
        user.set_password(password)
        user.save()
        return user

    return _make_user


@pytest.fixture
def owner(make_user):
    return make_user(name="Alice", email="alice@example.com")


@pytest.fixture
def collaborator(make_user):
    return make_user(name="Bob", email="bob@example.com")


@pytest.fixture
def stranger(make_user):
    return make_user(name="Carol", email="carol@example.com")


@pytest.fixture
def auth_client():
    """Returns an APIClient that sends the bearer token of the given user."""

    def _auth_client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
        return client

    return _auth_client


@pytest.fixture
def project(owner, collaborator):
    project = Project.objects.create(name="Website", description="Company site", owner=owner)
    project.collaborators.add(collaborator)
    return project


@pytest.fixture
def make_task(db):

    def _make_task(project, created_by, **fields):
        fields.setdefault("name", "Task")
        return Task.objects.create(project=project, created_by=created_by, **fields)

    return _make_task
