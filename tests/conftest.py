import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


@pytest.fixture(autouse=True)
def craft_env(monkeypatch):
    monkeypatch.setenv("CRAFT_API_BASE_URL", "https://craft.example.test/api/v1")
    monkeypatch.setenv("CRAFT_API_TOKEN", "secret-token")
    monkeypatch.delenv("DAILY_TASKS_URL", raising=False)


def run_against_app(app: web.Application, scenario):
    """Поднимает aiohttp-приложение на случайном порту и выполняет scenario(base_url)."""

    async def _run():
        server = TestServer(app)
        await server.start_server()
        try:
            return await scenario(f"http://{server.host}:{server.port}")
        finally:
            await server.close()

    return asyncio.run(_run())
