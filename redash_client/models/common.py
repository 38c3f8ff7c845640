"""Shared Pydantic base classes and models embedded across resources."""

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict

ItemT = TypeVar("ItemT")


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


# Collections the service sends as null when empty (e.g. tags on untagged records)
NullableList = Annotated[list[ItemT], BeforeValidator(_none_as_empty)]


class RedashModel(BaseModel):
    """Base for every wire model.

    Fields whose wire name is not a valid or idiomatic Python name declare an
    alias; either name is accepted when constructing models in code.
    """

    model_config = ConfigDict(populate_by_name=True)


class User(RedashModel):
    """User summary embedded in dashboards and queries."""

    id: int
    name: str
    email: str | None = None
    profile_image_url: str | None = None
    is_disabled: bool | None = None


class PageMeta(RedashModel):
    """Pagination envelope returned by collection endpoints."""

    count: int
    page: int
    page_size: int
