"""API main router - aggregates all endpoint routers."""

from newsapi.api import articles, scrape
from newsapi.http import Router


def create_router() -> Router:
    """Build the route table in match-priority order."""
    api_router = Router()
    api_router.include(articles.router)
    api_router.include(scrape.router)
    return api_router
