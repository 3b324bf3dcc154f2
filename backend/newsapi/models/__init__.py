"""Models package - SQLModel database models."""

from newsapi.models.article import Article

__all__ = ["Article"]
