import azure.functions as func
import pytest
import requests

from Preview.config import Settings


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self._text, 0)
        return self._payload


class FakeSession:
    """Stands in for ``requests``; records every GET it receives."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def make_request():
    def _make(params=None, headers=None, route_params=None):
        return func.HttpRequest(
            method="GET",
            url="/api/preview",
            headers=headers if headers is not None else {"host": "devotions.test", "x-forwarded-proto": "https"},
            params=params or {},
            route_params=route_params or {},
            body=b"",
        )
    return _make


@pytest.fixture
def meta_session():
    return FakeSession(FakeResponse(payload=[
        {"type": "verse", "text": "In the beginning"},
        {"type": "meta", "title": "T", "subtitle": "S", "imageUrl": "/img.png"},
    ]))
