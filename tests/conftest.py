"""
Shared pytest configuration and fixtures for the email hunter tests.

Pages are served by a real ``aiohttp`` server bound to 127.0.0.1 so that
fetching, status handling and same-host resolution run end to end.
"""

import asyncio
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import pytest
from aiohttp import web
from aiohttp import test_utils

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from email_hunter import ExtractionResult


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep user config files and EMAILHUNTER_* variables out of the tests."""
    for name in (
        "EMAILHUNTER_CONCURRENCY",
        "EMAILHUNTER_TIMEOUT",
        "EMAILHUNTER_MAX_BODY_BYTES",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("EMAILHUNTER_CONFIG", str(tmp_path / "missing-config.json"))
    monkeypatch.setenv("EMAILHUNTER_LOG_FILE", "")


@pytest.fixture
def serve_site():
    """Factory for a throwaway site.

    ``pages`` maps a request path to either a body string (served as 200
    ``text/html``), a ``(status, body)`` tuple, or an async handler taking the
    request. Unknown paths return 404.
    """

    @asynccontextmanager
    async def _serve(pages):
        async def handler(request):
            page = pages.get(request.path)
            if page is None:
                return web.Response(status=404, text="not found")
            if callable(page):
                return await page(request)
            if isinstance(page, tuple):
                status, body = page
                return web.Response(status=status, text=body, content_type="text/html")
            return web.Response(text=page, content_type="text/html")

        app = web.Application()
        app.router.add_get("/{tail:.*}", handler)
        server = test_utils.TestServer(app)
        await server.start_server()
        try:
            yield server
        finally:
            await server.close()

    return _serve


@pytest.fixture
def slow_page():
    """Handler that answers long after any test timeout."""

    async def handler(request):
        await asyncio.sleep(2)
        return web.Response(text="<p>late@site.com</p>", content_type="text/html")

    return handler


class InstrumentedFetcher:
    """Stand-in for ``fetch_page`` that serves canned results.

    Records every call and the peak number of calls in flight at once.
    """

    def __init__(self, results, delay=0.01):
        self.results = results
        self.delay = delay
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, session, target_url, origin_url, **kwargs):
        self.calls.append((target_url, origin_url, kwargs))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        return self.results.get(target_url, ExtractionResult(source_url=target_url))


@pytest.fixture
def instrumented_fetcher():
    return InstrumentedFetcher
