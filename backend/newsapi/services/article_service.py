"""Article service - one SQL statement per operation."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsapi.models import Article


class ArticleService:
    """
    Persistence operations on the articles table.

    Every write commits on its own, so a sequence of calls (e.g. a scrape
    batch) is never wrapped in a single transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, title: str, content: str, source: str) -> Article:
        """Insert an article and return it with its assigned id."""
        article = Article(title=title, content=content, source=source)
        self.session.add(article)
        await self.session.commit()
        await self.session.refresh(article)
        return article

    async def get(self, article_id: int) -> Article | None:
        """Get a single article by id."""
        return await self.session.get(Article, article_id)

    async def list_all(self) -> list[Article]:
        """Get every article, oldest first."""
        result = await self.session.execute(select(Article).order_by(Article.id))
        return list(result.scalars().all())

    async def update(self, article_id: int, title: str, content: str, source: str) -> int:
        """Overwrite title, content and source. Returns the number of rows matched."""
        result = await self.session.execute(
            update(Article)
            .where(Article.id == article_id)
            .values(title=title, content=content, source=source)
        )
        await self.session.commit()
        return result.rowcount

    async def delete(self, article_id: int) -> int:
        """Delete an article by id. Returns the number of rows removed."""
        result = await self.session.execute(delete(Article).where(Article.id == article_id))
        await self.session.commit()
        return result.rowcount

    async def delete_by_source(self, source: str) -> int:
        """Delete every article whose source tag equals `source` exactly."""
        result = await self.session.execute(delete(Article).where(Article.source == source))
        await self.session.commit()
        return result.rowcount
