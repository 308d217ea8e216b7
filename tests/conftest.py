from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator

import httpx
import pytest

import adapters.aoc_input as aoc_input
from adapters.http_client import build_client


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch) -> Iterator[None]:
    """Keep `.env` files, AOC_TOOLS_* variables and CLI logging handlers out of the tests."""

    for name in list(os.environ):
        if name.upper().startswith("AOC_TOOLS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers_before:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers_before:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level_before)


class FakeAocServer:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self, status_code: int = 200, body: bytes = b"1\n2\n3\n") -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)


@pytest.fixture
def aoc_server(monkeypatch) -> Callable[..., FakeAocServer]:
    """Route every client the fetcher builds through an in-memory transport."""

    def install(handler: Callable[[httpx.Request], httpx.Response] | None = None, **kwargs):
        server = handler if handler is not None else FakeAocServer(**kwargs)
        transport = httpx.MockTransport(server)
        monkeypatch.setattr(
            aoc_input,
            "build_client",
            lambda settings=None, **kw: build_client(settings, transport=transport),
        )
        return server

    return install
