"""Shared fixtures: a fake GitHub behind httpx.MockTransport."""

import json

import httpx
import pytest

from ghrepo import AsyncRequestExecutor, RequestExecutor


class FakeGitHub:
    """Records every request and replays one canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {}
        self.text = None
        self.error = None

    def respond(self, payload=None, status_code=200, text=None):
        self.payload = payload if payload is not None else {}
        self.status_code = status_code
        self.text = text

    def fail_with(self, error):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def github():
    return FakeGitHub()


@pytest.fixture
def executor(github):
    return RequestExecutor(transport=httpx.MockTransport(github.handler))


@pytest.fixture
def async_executor(github):
    return AsyncRequestExecutor(transport=httpx.MockTransport(github.handler))
