"""External catalog domain models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogSuggestion(BaseModel):
    """A candidate title, author and cover returned by the book catalog."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    key: str
    title: str
    author: str | None = None
    cover_url: str | None = None
