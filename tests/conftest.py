"""Shared fixtures: a `ForgeApi` backed by `httpx.MockTransport`."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import ForgeApi, build_client
from core.config import AppSettings

BASE_URL = "https://forge.test/api/v1/"


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses.

    `routes` maps `(METHOD, path-relative-to-base)` to a response factory or to
    a JSON-serializable body (returned with status 200).
    """

    def __init__(self, routes: dict[tuple[str, str], Any] | None = None) -> None:
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/v1/")
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if callable(route):
            return route(request)
        if isinstance(route, str):
            return httpx.Response(200, text=route)
        return httpx.Response(200, json=route)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_token="test-token",
        base_url=BASE_URL,
        http_timeout_seconds=5,
    )


@pytest.fixture
def make_api(settings: AppSettings) -> Callable[..., tuple[ForgeApi, RecordingHandler]]:
    def factory(routes: dict[tuple[str, str], Any] | None = None) -> tuple[ForgeApi, RecordingHandler]:
        handler = RecordingHandler(routes)
        client = build_client(settings, transport=httpx.MockTransport(handler))
        return ForgeApi(client), handler

    return factory
