"""Shared fixtures: captured status pages, a fake modem web server and client sessions."""

from __future__ import annotations

import asyncio
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web
from aiohttp.test_utils import TestServer

TESTDATA = Path(__file__).parent / "testdata"

SB6121_PAGE = "SB6121-signal.html"
SB6183_PAGE = "SB6183.html"
SB8200_PAGE = "SB8200.html"


@pytest.fixture
def page_path():
    """Path to a captured status page under testdata/."""

    def _path(name: str) -> Path:
        path = TESTDATA / name
        if not path.exists():
            raise FileNotFoundError(f"Test page not found: {path}")
        return path

    return _path


@pytest.fixture
def load_page(page_path):
    """Raw bytes of a captured status page."""

    def _load(name: str) -> bytes:
        return page_path(name).read_bytes()

    return _load


@pytest.fixture
def sb6121_page(load_page) -> bytes:
    return load_page(SB6121_PAGE)


@pytest.fixture
def sb6183_page(load_page) -> bytes:
    return load_page(SB6183_PAGE)


@pytest.fixture
def sb8200_page(load_page) -> bytes:
    return load_page(SB8200_PAGE)


@pytest.fixture
def poisoned_session():
    """A ClientSession stand-in that fails the test if anything tries to use the network."""
    session = MagicMock(spec=ClientSession)
    session.get.side_effect = AssertionError("network access attempted")
    session.request.side_effect = AssertionError("network access attempted")
    return session


class FakeModemServer:
    """Serves whatever bytes are put in `pages`, keyed by request path. Everything else is a 404."""

    def __init__(self):
        self.pages: dict[str, bytes] = {}
        self.requests: list[str] = []
        self.delay = 0.0
        self.status = 200
        self._server: TestServer | None = None

    async def _handle(self, request: web.Request) -> web.StreamResponse:
        self.requests.append(request.path)
        if self.delay:
            await asyncio.sleep(self.delay)
        body = self.pages.get(request.path)
        if body is None:
            raise web.HTTPNotFound()
        return web.Response(body=body, status=self.status, content_type="text/html")

    async def start(self) -> None:
        app = web.Application()
        app.router.add_get("/{tail:.*}", self._handle)
        self._server = TestServer(app)
        await self._server.start_server()

    async def close(self) -> None:
        if self._server is not None:
            await self._server.close()

    @property
    def base_url(self) -> str:
        return f"http://{self._server.host}:{self._server.port}"


@pytest_asyncio.fixture
async def modem_server():
    server = FakeModemServer()
    await server.start()
    yield server
    await server.close()


@pytest_asyncio.fixture
async def client_session():
    async with ClientSession() as cs:
        yield cs
