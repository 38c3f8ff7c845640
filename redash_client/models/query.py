"""Pydantic models for queries, their parameters and schedules."""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from redash_client.models.common import NullableList, PageMeta, RedashModel, User
from redash_client.models.visualization import Visualization


class QueryParameter(RedashModel):
    """One entry of a query's parameter schema.

    ``type`` is one of ``text``, ``number``, ``date``/``datetime-local``,
    ``enum`` (dropdown) or ``query`` (dropdown fed by another query).
    ``is_global`` marks a parameter shared across the widgets of a dashboard.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    title: str | None = None
    type: str
    value: Any = None
    is_global: bool | None = Field(None, alias="global")
    enum_options: str | None = Field(None, alias="enumOptions")
    query_id: int | None = Field(None, alias="queryId")
    parent_query_id: int | None = Field(None, alias="parentQueryId")
    locals: list[Any] | None = None


class QueryOptions(RedashModel):
    model_config = ConfigDict(extra="allow")

    parameters: NullableList[QueryParameter] = []


class QuerySchedule(RedashModel):
    """Refresh schedule. ``interval`` is in seconds; ``until`` ends the schedule."""

    interval: int | None = None
    time: str | None = None
    day_of_week: str | None = None
    until: str | None = None


class QueryListItem(RedashModel):
    """Query summary returned by ``GET /api/queries`` and embedded in widgets."""

    id: int
    name: str
    description: str | None = None

    data_source_id: int | None = None
    query: str
    query_hash: str | None = None  # computed by the service, passed through

    options: QueryOptions = Field(default_factory=QueryOptions)
    schedule: QuerySchedule | None = None

    is_draft: bool = False
    is_archived: bool = False
    is_safe: bool | None = None
    is_favorite: bool | None = None
    version: int = 1

    user: User | None = None
    last_modified_by_id: int | None = None
    api_key: str | None = None
    tags: NullableList[str] = []
    latest_query_data_id: int | None = None

    retrieved_at: datetime | None = None
    runtime: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Query(QueryListItem):
    """Full query returned by ``GET /api/queries/<id>``, including its visualizations."""

    last_modified_by: User | None = None
    can_edit: bool | None = None
    visualizations: NullableList[Visualization] = []


class QueryList(PageMeta):
    """One page of ``GET /api/queries``."""

    results: list[QueryListItem]


class QueryCreate(RedashModel):
    """Request body for ``POST /api/queries``."""

    name: str
    query: str
    data_source_id: int
    description: str | None = None
    query_hash: str | None = None
    options: QueryOptions | None = None
    schedule: QuerySchedule | None = None
    is_draft: bool | None = None
    tags: list[str] | None = None


class QueryUpdate(RedashModel):
    """Request body for ``POST /api/queries/<id>``. Unset fields are left unchanged.

    Sending ``version`` lets the service reject the update with HTTP 409
    when the query changed since it was read.
    """

    name: str | None = None
    query: str | None = None
    data_source_id: int | None = None
    description: str | None = None
    query_hash: str | None = None
    options: QueryOptions | None = None
    schedule: QuerySchedule | None = None
    is_draft: bool | None = None
    tags: list[str] | None = None
    version: int | None = None
