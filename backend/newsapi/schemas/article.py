"""Article schemas for request/response bodies."""

from pydantic import BaseModel, Field, StrictInt, TypeAdapter

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class ArticleSchema(BaseModel):
    """JSON shape of an article on the wire."""

    id: StrictInt | None = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    title: str
    content: str
    source: str

    class Config:
        from_attributes = True


ArticleListAdapter = TypeAdapter(list[ArticleSchema])
