"""Shared fixtures: a fresh client singleton per test and a fake Nexus API server."""

from __future__ import annotations

import asyncio
import threading

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from nexus_cli.api import NexusAPIClient

API_KEY = "test-key"

GAMES = [
    {
        "id": 1704,
        "name": "Skyrim Special Edition",
        "domain_name": "skyrimspecialedition",
        "genre": "RPG",
        "approved_date": 1477502812,
        "mods": 95000,
        "downloads": 6000000000,
        "file_count": 400000,
        "forum_url": "https://forums.nexusmods.com",
    },
    {
        "id": 1151,
        "name": "Stardew Valley",
        "domain_name": "stardewvalley",
        "genre": "Simulation",
        "approved_date": 1457432251,
        "mods": 20000,
        "downloads": 500000000,
    },
]

UNAPPROVED_GAME = {
    "id": 9999,
    "name": "Obscure Indie Game",
    "domain_name": "obscureindiegame",
    "approved_date": 0,
    "mods": 3,
    "downloads": 12,
}

MOD = {
    "mod_id": 266,
    "game_id": 1704,
    "domain_name": "skyrimspecialedition",
    "name": "Unofficial Skyrim Special Edition Patch",
    "summary": "Fixes thousands of bugs [SSE]",
    "version": "4.3.2",
    "author": "Arthmoor",
    "endorsement_count": 300000,
    "mod_downloads": 20000000,
    "mod_unique_downloads": 9000000,
    "updated_time": "2024-05-01T00:00:00.000+00:00",
    "contains_adult_content": False,
    "status": "published",
    "available": True,
    "user": {"member_id": 12345, "member_group_id": 27, "name": "Arthmoor"},
}

USER = {
    "user_id": 4242,
    "key": API_KEY,
    "name": "modder",
    "is_premium?": False,
    "is_supporter?": True,
    "email": "modder@example.com",
    "profile_url": "https://www.nexusmods.com/users/4242",
}

_NEXUS_ENV = ("NEXUS_API_KEY", "NEXUS_API_BASE_URL", "NEXUS_API_TIMEOUT_MS", "RETRY_DELAY")


@pytest.fixture(autouse=True)
def isolated_client(monkeypatch, tmp_path):
    """Reset the singleton and keep the host environment (and any .env) out of tests."""
    monkeypatch.setattr(NexusAPIClient, "_instance", None)
    for name in _NEXUS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class FakeNexus:
    """Records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[web.Request] = []

    async def handle(self, request: web.Request) -> web.StreamResponse:
        self.requests.append(request)
        path = request.raw_path

        if path == "/v1/users/validate.json":
            if request.headers.get("apikey") != API_KEY:
                return web.json_response({"message": "Please provide a valid API Key"}, status=401)
            return web.json_response(USER)

        if path == "/v1/games.json":
            return web.json_response(GAMES)

        if path == "/v1/games.json?include_unapproved=true":
            return web.json_response(GAMES + [UNAPPROVED_GAME])

        if path == "/v1/games/broken/mods/1.json":
            return web.Response(text="{not json", content_type="application/json")

        if path == "/v1/games/skyrimspecialedition/mods/266.json":
            return web.json_response(MOD)

        if path.startswith("/v1/games/") and path.endswith(".json"):
            return web.json_response({"code": 404, "message": "No Mod Found"}, status=404)

        return web.json_response({"message": "Not Found"}, status=404)


@pytest_asyncio.fixture
async def nexus_server():
    fake = FakeNexus()
    app = web.Application()
    app.router.add_get("/{tail:.*}", fake.handle)

    server = TestServer(app)
    await server.start_server()
    fake.base_url = str(server.make_url("/v1"))
    try:
        yield fake
    finally:
        await server.close()


@pytest_asyncio.fixture
async def client(nexus_server):
    return NexusAPIClient(api_key=API_KEY, base_url=nexus_server.base_url, timeout=5)


@pytest.fixture
def threaded_nexus_server():
    """Fake API served from its own loop in a thread, for tests that call asyncio.run themselves."""
    fake = FakeNexus()
    app = web.Application()
    app.router.add_get("/{tail:.*}", fake.handle)

    loop = asyncio.new_event_loop()
    runner = web.AppRunner(app)
    loop.run_until_complete(runner.setup())
    site = web.TCPSite(runner, "127.0.0.1", 0)
    loop.run_until_complete(site.start())
    host, port = runner.addresses[0][:2]
    fake.base_url = f"http://{host}:{port}/v1"

    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()
    try:
        yield fake
    finally:
        asyncio.run_coroutine_threadsafe(runner.cleanup(), loop).result(timeout=5)
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout=5)
        loop.close()
