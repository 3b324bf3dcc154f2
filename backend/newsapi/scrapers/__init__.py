"""Scrapers package - third-party pages turned into articles."""

from newsapi.scrapers.imdb import (
    IMDB_SOURCE,
    ImdbScraper,
    RankedTitle,
    ScrapeError,
    ScraperConfig,
    rank_titles,
)

__all__ = [
    "IMDB_SOURCE",
    "ImdbScraper",
    "RankedTitle",
    "ScrapeError",
    "ScraperConfig",
    "rank_titles",
]
