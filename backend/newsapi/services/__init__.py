"""Services package - business logic over the database."""

from newsapi.services.article_service import ArticleService

__all__ = ["ArticleService"]
