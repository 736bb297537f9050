# taskboard_client/api.py

import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiError(Exception):
    """
    Raised for any non-2xx response of the API, and for transport failures
    (status is None in that case).
    """

    def __init__(self, status, message):
        super().__init__(message)
        self.status = status
        self.message = message

    def __str__(self):
        if self.status is None:
            return self.message
        return f"{self.status}: {self.message}"


def error_message(response):
    """
    Extracts a readable message from an error response: {"msg": ...}
    or the first entry of {"errors": [...]}.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        if body.get('msg'):
            return body['msg']

        errors = body.get('errors')
        if errors and isinstance(errors, list) and isinstance(errors[0], dict):
            return errors[0].get('msg') or 'Request failed'

    return response.reason or f"HTTP {response.status_code}"


class ApiClient:
    """
    Thin wrapper around a requests.Session that knows the API base URL
    and the bearer token of the signed-in user.
    """

    def __init__(self, base_url, token=None, session=None, timeout=DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.session = session if session is not None else requests.Session()
        self.token = token
        self.timeout = timeout

    def set_token(self, token):
        self.token = token

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method, path, json=None, params=None):
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f"Bearer {self.token}"

        try:
            response = self.session.request(
                method,
                self.url(path),
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(None, str(exc)) from exc

        if not response.ok:
            message = error_message(response)
            logger.debug("%s %s -> %s %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, message)

        if not response.content:
            return None
        return response.json()

    def get(self, path, params=None):
        return self.request('GET', path, params=params)

    def post(self, path, json=None):
        return self.request('POST', path, json=json)

    def put(self, path, json=None):
        return self.request('PUT', path, json=json)

    def delete(self, path):
        return self.request('DELETE', path)
