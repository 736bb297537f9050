"""
Tests for registration, login, bearer tokens and the profile endpoint.
"""

from datetime import timedelta

import pytest
from django.utils.timezone import now
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.tokens import AccessToken

from users.models import User, UserAction
from users.utils import ACCOUNTS, STATUS_ACCESS_DENIED, issue_token, verify_token

from conftest import PASSWORD

pytestmark = pytest.mark.django_db

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"
PROFILE_URL = "/api/users/profile"


def error_paths(response):
    return [error["path"] for error in response.json()["errors"]]


class TestRegister:

    def test_returns_token_and_user(self, api_client):
        response = api_client.post(REGISTER_URL, {"name": "Alice", "email": "alice@example.com", "password": PASSWORD})

        assert response.status_code == 201
        body = response.json()
        assert set(body) == {"token", "user"}
        assert body["user"]["name"] == "Alice"
        assert body["user"]["email"] == "alice@example.com"
        assert "password" not in body["user"]

    def test_password_is_stored_hashed(self, api_client):
        api_client.post(REGISTER_URL, {"name": "Alice", "email": "alice@example.com", "password": PASSWORD})

        user = User.objects.get(email="alice@example.com")
        assert user.password != PASSWORD
        assert user.check_password(PASSWORD)

    def test_email_is_normalized(self, api_client):
        response = api_client.post(REGISTER_URL, {"name": "Alice", "email": "Alice@Example.COM", "password": PASSWORD})

        assert response.status_code == 201
        assert response.json()["user"]["email"] == "alice@example.com"

    def test_duplicate_email_rejected(self, api_client):
        payload = {"name": "Alice", "email": "alice@example.com", "password": PASSWORD}
        api_client.post(REGISTER_URL, payload)

        response = api_client.post(REGISTER_URL, payload)

        assert response.status_code == 400
        assert response.json() == {"msg": "A user with this email already exists."}
        assert User.objects.count() == 1

    def test_duplicate_email_differs_only_in_case(self, api_client):
        api_client.post(REGISTER_URL, {"name": "Alice", "email": "alice@example.com", "password": PASSWORD})

        response = api_client.post(REGISTER_URL, {"name": "Alice 2", "email": "ALICE@example.com", "password": PASSWORD})

        assert response.status_code == 400

    def test_missing_name(self, api_client):
        response = api_client.post(REGISTER_URL, {"email": "alice@example.com", "password": PASSWORD})

        assert response.status_code == 400
        assert {"path": "name", "msg": "Name is required."} in response.json()["errors"]

    def test_invalid_email(self, api_client):
        response = api_client.post(REGISTER_URL, {"name": "Alice", "email": "not-an-email", "password": PASSWORD})

        assert response.status_code == 400
        assert error_paths(response) == ["email"]

    def test_short_password(self, api_client):
        response = api_client.post(REGISTER_URL, {"name": "Alice", "email": "alice@example.com", "password": "abc"})

        assert response.status_code == 400
        assert error_paths(response) == ["password"]
        assert not User.objects.exists()

    def test_registration_is_audited(self, api_client):
        api_client.post(REGISTER_URL, {"name": "Alice", "email": "alice@example.com", "password": PASSWORD})

        action = UserAction.objects.get()
        assert action.type.name == ACCOUNTS
        assert action.user.email == "alice@example.com"


class TestLogin:

    def test_returns_valid_token(self, api_client, owner):
        response = api_client.post(LOGIN_URL, {"email": owner.email, "password": PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["user"] == {"id": owner.id, "name": owner.name, "email": owner.email}
        assert str(verify_token(body["token"])) == str(owner.id)

    def test_stamps_last_login(self, api_client, owner):
        assert owner.last_login is None

        api_client.post(LOGIN_URL, {"email": owner.email, "password": PASSWORD})

        owner.refresh_from_db()
        assert owner.last_login is not None

    def test_email_is_case_insensitive(self, api_client, owner):
        response = api_client.post(LOGIN_URL, {"email": "ALICE@example.com", "password": PASSWORD})

        assert response.status_code == 200

    @pytest.mark.parametrize("email,password", [
        ("alice@example.com", "wrong-password"),
        ("nobody@example.com", PASSWORD),
    ])
    def test_bad_credentials(self, api_client, owner, email, password):
        response = api_client.post(LOGIN_URL, {"email": email, "password": password})

        assert response.status_code == 400
        assert response.json() == {"msg": "Invalid credentials."}

    def test_inactive_account(self, api_client, make_user):
        user = make_user(email="inactive@example.com", is_active=False)

        response = api_client.post(LOGIN_URL, {"email": user.email, "password": PASSWORD})

        assert response.status_code == 400
        assert response.json() == {"msg": "Invalid credentials."}
        assert UserAction.objects.filter(user=user, status=STATUS_ACCESS_DENIED).exists()

    def test_missing_password(self, api_client, owner):
        response = api_client.post(LOGIN_URL, {"email": owner.email})

        assert response.status_code == 400
        assert error_paths(response) == ["password"]


class TestTokens:

    def test_issued_token_round_trips(self, owner):
        assert str(verify_token(issue_token(owner))) == str(owner.id)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token(self, token):
        with pytest.raises(InvalidToken):
            verify_token(token)

    def test_tampered_token(self, owner):
        token = issue_token(owner)
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])

        with pytest.raises(InvalidToken):
            verify_token(tampered)

    def test_lifetime_is_five_days(self, owner):
        token = AccessToken(issue_token(owner))

        assert token["exp"] - token["iat"] == timedelta(days=5).total_seconds()

    def test_expired_after_five_days(self, owner):
        token = AccessToken.for_user(owner)
        token.set_exp(from_time=now() - timedelta(days=5, seconds=1))

        with pytest.raises(InvalidToken):
            verify_token(str(token))

    def test_valid_until_five_days(self, owner):
        token = AccessToken.for_user(owner)
        token.set_exp(from_time=now() - timedelta(days=5) + timedelta(minutes=1))

        assert str(verify_token(str(token))) == str(owner.id)


class TestProfile:

    def test_returns_current_user(self, auth_client, owner):
        response = auth_client(owner).get(PROFILE_URL)

        assert response.status_code == 200
        assert response.json() == {"id": owner.id, "name": owner.name, "email": owner.email}

    def test_requires_token(self, api_client):
        response = api_client.get(PROFILE_URL)

        assert response.status_code == 401
        assert "msg" in response.json()

    def test_rejects_invalid_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer garbage")

        response = api_client.get(PROFILE_URL)

        assert response.status_code == 401
        assert set(response.json()) == {"msg"}

    def test_rejects_expired_token(self, api_client, owner):
        token = AccessToken.for_user(owner)
        token.set_exp(from_time=now() - timedelta(days=5, seconds=1))
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = api_client.get(PROFILE_URL)

        assert response.status_code == 401


def test_health_endpoint_is_public(api_client):
    response = api_client.get("/api")

    assert response.status_code == 200
    assert response.json() == {"msg": "Project management API is running"}
