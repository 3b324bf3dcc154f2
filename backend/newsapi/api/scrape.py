"""Scrape endpoints - import the IMDb chart as articles and remove it again."""

import logging

from newsapi.http import HTTPException, Request, Response, Router
from newsapi.scrapers import IMDB_SOURCE, ScrapeError
from newsapi.services import ArticleService
from newsapi.state import AppState

logger = logging.getLogger(__name__)

router = Router()


@router.post("/scrape/imdb")
async def scrape_imdb(request: Request, state: AppState) -> Response:
    """
    Scrape the IMDb chart and insert its top titles in rank order.

    Each insert commits on its own; the first failing insert aborts the batch
    and leaves the rows inserted before it in place.
    """
    try:
        async with state.new_scraper() as scraper:
            ranked = await scraper.scrape()
    except ScrapeError as e:
        raise HTTPException(status_code=500, detail=f"Scraping failed: {e}") from e

    async with state.session_factory() as session:
        service = ArticleService(session)
        for entry in ranked:
            await service.create(title=entry.title, content=entry.content, source=IMDB_SOURCE)

    logger.info("Inserted %d %s articles", len(ranked), IMDB_SOURCE)
    return Response.ok("Scraping completed")


@router.delete("/scrape/source/imdb")
async def delete_imdb_articles(request: Request, state: AppState) -> Response:
    """Delete every article tagged with the imdb source."""
    return await delete_articles_by_source(state, IMDB_SOURCE)


async def delete_articles_by_source(state: AppState, source: str) -> Response:
    """Delete every article whose source equals `source`."""
    async with state.session_factory() as session:
        deleted = await ArticleService(session).delete_by_source(source)

    if deleted == 0:
        raise HTTPException(status_code=404, detail=f"No articles found for source {source}")

    logger.info("Deleted %d %s articles", deleted, source)
    return Response.ok("Articles deleted")
