"""Schemas package - pydantic wire models."""

from newsapi.schemas.article import ArticleListAdapter, ArticleSchema

__all__ = ["ArticleSchema", "ArticleListAdapter"]
