"""Articles CRUD endpoints."""

import logging

from newsapi.http import HTTPException, Request, Response, Router, parse_article_id
from newsapi.schemas import ArticleListAdapter, ArticleSchema
from newsapi.services import ArticleService
from newsapi.state import AppState

logger = logging.getLogger(__name__)

router = Router()


@router.post("/articles")
async def create_article(request: Request, state: AppState) -> Response:
    """Create an article from the JSON body. Any id in the body is ignored."""
    article_in = ArticleSchema.model_validate_json(request.body)

    async with state.session_factory() as session:
        article = await ArticleService(session).create(
            title=article_in.title,
            content=article_in.content,
            source=article_in.source,
        )

    logger.info("Created article %s", article.id)
    return Response.ok("Article created")


@router.get("/articles/")
async def get_article(request: Request, state: AppState) -> Response:
    """Get a specific article by ID."""
    article_id = parse_article_id(request.resource_id)

    async with state.session_factory() as session:
        article = await ArticleService(session).get(article_id)

    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")

    return Response.ok(ArticleSchema.model_validate(article).model_dump_json())


@router.get("/articles")
async def list_articles(request: Request, state: AppState) -> Response:
    """List every article."""
    async with state.session_factory() as session:
        articles = await ArticleService(session).list_all()

    schemas = [ArticleSchema.model_validate(a) for a in articles]
    return Response.ok(ArticleListAdapter.dump_json(schemas).decode("utf-8"))


@router.put("/articles/")
async def update_article(request: Request, state: AppState) -> Response:
    """
    Overwrite title, content and source of an article.

    There is no existence check: updating an unknown id matches no row and
    still reports success.
    """
    article_id = parse_article_id(request.resource_id)
    article_in = ArticleSchema.model_validate_json(request.body)

    async with state.session_factory() as session:
        matched = await ArticleService(session).update(
            article_id,
            title=article_in.title,
            content=article_in.content,
            source=article_in.source,
        )

    if not matched:
        logger.info("Update of article %s matched no rows", article_id)
    return Response.ok("Article updated")


@router.delete("/articles/")
async def delete_article(request: Request, state: AppState) -> Response:
    """Delete an article by ID."""
    article_id = parse_article_id(request.resource_id)

    async with state.session_factory() as session:
        deleted = await ArticleService(session).delete(article_id)

    if deleted == 0:
        raise HTTPException(status_code=404, detail="Article not found")

    return Response.ok("Article deleted")
