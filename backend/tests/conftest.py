"""pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Awaitable, Callable

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from newsapi.api.router import create_router
from newsapi.config import Settings
from newsapi.db import create_engine, create_session_factory, init_db
from newsapi.http import Response, Router, parse_request
from newsapi.scrapers import ImdbScraper, ScraperConfig
from newsapi.state import AppState

IMDB_TEST_URL = "https://imdb.test/chart/top/"

Send = Callable[..., Awaitable[Response]]


def raw_request(method: str, path: str, body: str | None = None) -> str:
    """Build a request the way curl would send it."""
    lines = [f"{method} {path} HTTP/1.1", "Host: localhost:8080", "User-Agent: pytest"]
    if body is not None:
        lines.append("Content-Type: application/json")
        lines.append(f"Content-Length: {len(body.encode())}")
    return "\r\n".join(lines) + "\r\n\r\n" + (body or "")


def chart_html(count: int) -> str:
    """IMDb-like chart markup with `count` title headings."""
    items = "".join(
        f'<li class="ipc-metadata-list-summary-item">'
        f'<a href="/title/tt{i:07d}/"><h3 class="ipc-title__text">Movie {i}</h3></a>'
        f"</li>"
        for i in range(1, count + 1)
    )
    return f"<html><head><title>Top 250</title></head><body><ul>{items}</ul></body></html>"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'articles.db'}",
        imdb_url=IMDB_TEST_URL,
    )


@pytest.fixture
async def engine(settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
def chart_handler() -> Callable[[httpx.Request], httpx.Response]:
    """Serves a 12-entry chart. Override in a test module to change the page."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, html=chart_html(12))

    return handler


@pytest.fixture
def state(
    settings: Settings,
    session_factory: async_sessionmaker[AsyncSession],
    chart_handler: Callable[[httpx.Request], httpx.Response],
) -> AppState:
    config = ScraperConfig.from_settings(settings)
    transport = httpx.MockTransport(chart_handler)
    return AppState(
        settings=settings,
        session_factory=session_factory,
        scraper_factory=lambda: ImdbScraper(config, transport=transport),
    )


@pytest.fixture
def router() -> Router:
    return create_router()


@pytest.fixture
def send(router: Router, state: AppState) -> Send:
    """Dispatch a request through the full route table."""

    async def _send(method: str, path: str, body: str | None = None) -> Response:
        data = raw_request(method, path, body).encode("utf-8")
        return await router.dispatch(parse_request(data), state)

    return _send
