"""Shared fakes for the GitHub API: no test talks to the network."""

from __future__ import annotations

import json
from typing import Any, Callable

import pytest
import requests

from release_updater.errors import NotFoundError, TransportError
from release_updater.models import Release


def _response(status: int, payload: Any = None, *, link: str | None = None,
              reason: str = "") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response._content = json.dumps(payload).encode() if payload is not None else b""
    response.headers["Content-Type"] = "application/json"
    if link:
        response.headers["Link"] = link
    return response


class FakeSession:
    """Stands in for requests.Session; answers from a handler function."""

    def __init__(self, handler: Callable[..., requests.Response]):
        self.handler = handler
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, str, dict]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs) -> requests.Response:
        self.calls.append((method, url, kwargs))
        return self.handler(method, url, **kwargs)

    def close(self) -> None:
        self.closed = True


class FakeClient:
    """In-memory GitHubClient with the release endpoints only."""

    def __init__(self, releases: list[dict[str, Any]], fail_edit_for: set[str] | None = None):
        self.releases = releases
        self.fail_edit_for = fail_edit_for or set()
        self.fetched_tags: list[str] = []
        self.list_calls = 0
        self.edits: list[tuple[str, str]] = []
        self.closed = False

    def __enter__(self) -> "FakeClient":
        return self

    def __exit__(self, *exc) -> None:
        self.closed = True

    def list_releases(self, owner: str, repo: str) -> list[Release]:
        self.list_calls += 1
        return [Release.from_api(item) for item in self.releases]

    def get_release_by_tag(self, owner: str, repo: str, tag: str) -> Release:
        self.fetched_tags.append(tag)
        for item in self.releases:
            if item["tag_name"] == tag:
                return Release.from_api(item)
        raise NotFoundError(f"release {tag} not found", status_code=404, tag=tag)

    def edit_release(self, owner: str, repo: str, release: Release) -> Release:
        if release.tag_name in self.fail_edit_for:
            raise TransportError("PATCH failed: 500 Server Error", status_code=500)
        self.edits.append((release.tag_name, release.body))
        return release


@pytest.fixture
def make_response():
    return _response


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def sample_releases() -> list[dict[str, Any]]:
    return [
        {"id": 1, "tag_name": "v1", "body": "see CHANGELOG", "name": "v1"},
        {"id": 2, "tag_name": "v2", "body": "no match here", "name": "v2"},
    ]
