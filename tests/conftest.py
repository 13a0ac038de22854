"""Pytest configuration for ScriptSifter."""
import logging

import pytest

from scriptsifter.core.logger import logger


@pytest.fixture(autouse=True)
def reset_log_level():
    # the CLI toggles the shared logger level
    yield
    logger.setLevel(logging.INFO)


SCRIPT_BODY = 'const api = "https://api.example.com/v1/users"; const key = "aB3$fG7!kL9@zT2#";'


@pytest.fixture
def script_app():
    from aiohttp import web

    async def script(request):
        return web.Response(text=SCRIPT_BODY, content_type="application/javascript")

    async def missing(request):
        return web.Response(status=404, text="nope")

    app = web.Application()
    app.router.add_get("/app.js", script)
    app.router.add_get("/missing.js", missing)
    return app
