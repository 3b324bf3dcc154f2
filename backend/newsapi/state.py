"""Shared application state handed to every request handler."""

from collections.abc import Callable
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsapi.config import Settings
from newsapi.scrapers import ImdbScraper, ScraperConfig


@dataclass
class AppState:
    """Settings plus the factories handlers draw sessions and scrapers from."""

    settings: Settings
    session_factory: async_sessionmaker[AsyncSession]
    scraper_factory: Callable[[], ImdbScraper] | None = field(default=None)

    def __post_init__(self) -> None:
        if self.scraper_factory is None:
            config = ScraperConfig.from_settings(self.settings)
            self.scraper_factory = lambda: ImdbScraper(config)

    def new_scraper(self) -> ImdbScraper:
        return self.scraper_factory()
