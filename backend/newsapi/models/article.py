"""Article model - the only table the service persists."""

from sqlalchemy import Text
from sqlmodel import Field, SQLModel


class Article(SQLModel, table=True):
    """
    Stored article.
    Rows come from the CRUD endpoints or from the IMDb scraper (source "imdb").
    """

    __tablename__ = "articles"

    id: int | None = Field(default=None, primary_key=True)

    title: str
    content: str = Field(sa_type=Text)

    # Provenance tag, e.g. "imdb" for scraped rows
    source: str
