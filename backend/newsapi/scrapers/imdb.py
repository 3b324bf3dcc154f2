"""IMDb chart scraper - fetches the top movies page and ranks its titles."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice

import httpx
from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from newsapi.config import Settings

logger = logging.getLogger(__name__)

IMDB_SOURCE = "imdb"

_TEXT_CONTENT_TYPES = ("text/", "application/xhtml+xml", "application/xml")


class ScrapeError(Exception):
    """The page could not be fetched or parsed."""


@dataclass
class ScraperConfig:
    """Configuration for the scraper."""

    url: str = "https://www.imdb.com/chart/top/"
    title_selector: str = "h3.ipc-title__text"
    user_agent: str = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"
    limit: int = 10
    timeout_seconds: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScraperConfig":
        return cls(
            url=settings.imdb_url,
            title_selector=settings.imdb_title_selector,
            user_agent=settings.imdb_user_agent,
            limit=settings.scrape_limit,
            timeout_seconds=settings.scrape_timeout_seconds,
        )


@dataclass(frozen=True)
class RankedTitle:
    """A chart entry: its 1-based position and its title text."""

    rank: int
    title: str

    @property
    def content(self) -> str:
        return f"{self.rank}. {self.title}"


def rank_titles(titles: Iterable[str], limit: int) -> list[RankedTitle]:
    """Pair titles with 1-based ranks, keeping at most `limit` of them."""
    ranked = enumerate(titles, start=1)
    return [RankedTitle(rank=rank, title=title) for rank, title in islice(ranked, limit)]


class ImdbScraper:
    """
    Single-pass scraper for the IMDb top chart.

    One GET, one CSS selector, no retries. The HTTP transport can be swapped
    out (e.g. for httpx.MockTransport) without touching the parsing.
    """

    def __init__(
        self,
        config: ScraperConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or ScraperConfig()
        self.http = httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent},
            transport=transport,
        )

    async def fetch_page(self) -> str:
        """Fetch the chart page as text."""
        try:
            response = await self.http.get(self.config.url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise ScrapeError(f"Failed to fetch {self.config.url}: {e}") from e

        content_type = response.headers.get("content-type", "text/html")
        if not content_type.lower().startswith(_TEXT_CONTENT_TYPES):
            raise ScrapeError(f"Unexpected content type from {self.config.url}: {content_type}")
        return response.text

    def extract_titles(self, html: str) -> Iterator[str]:
        """Yield the text of every element matching the title selector, in page order."""
        soup = BeautifulSoup(html, "lxml")
        try:
            elements = soup.select(self.config.title_selector)
        except SelectorSyntaxError as e:
            raise ScrapeError(f"Invalid selector {self.config.title_selector!r}: {e}") from e
        return (element.get_text().strip() for element in elements)

    async def scrape(self) -> list[RankedTitle]:
        """Fetch the chart and return its first `limit` ranked titles."""
        html = await self.fetch_page()
        ranked = rank_titles(self.extract_titles(html), self.config.limit)
        logger.info("Scraped %d titles from %s", len(ranked), self.config.url)
        return ranked

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.http.aclose()

    async def __aenter__(self) -> "ImdbScraper":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
