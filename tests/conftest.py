"""
Pytest configuration and shared fixtures for Busylight tests.
"""
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from busylight import Busylight, Voidlight

# Nothing listens here, so connections are refused immediately.
UNREACHABLE_URL = "http://127.0.0.1:1"


class FakeBusylightServer:
    """Stands in for the Busylight HTTP server and records every query string."""

    def __init__(self):
        self.requests = []
        self.paths = []
        self.status = 200
        self.reason = "OK"
        self.server = None

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(dict(request.query))
        self.paths.append(request.path)
        return web.Response(status=self.status, reason=self.reason, text="done")

    def fail_with(self, status: int, reason: str):
        self.status = status
        self.reason = reason

    @property
    def url(self) -> str:
        return f"http://{self.server.host}:{self.server.port}"


@pytest_asyncio.fixture
async def busylight_server():
    """Provide a running fake Busylight server."""
    fake = FakeBusylightServer()
    app = web.Application()
    app.router.add_get("/", fake.handle)
    app.router.add_get("/busylight/", fake.handle)
    fake.server = TestServer(app)
    await fake.server.start_server()

    yield fake

    await fake.server.close()


@pytest_asyncio.fixture
async def busylight(busylight_server):
    """Provide a Busylight client pointed at the fake server."""
    async with Busylight(base_url=busylight_server.url) as client:
        yield client


@pytest_asyncio.fixture
async def voidlight(busylight_server):
    """Provide a Voidlight client pointed at the fake server."""
    async with Voidlight(base_url=busylight_server.url) as client:
        yield client


@pytest.fixture
def unreachable_url():
    return UNREACHABLE_URL
