"""Pydantic models for dashboards."""

from datetime import datetime
from typing import Any

from redash_client.models.common import NullableList, PageMeta, RedashModel, User
from redash_client.models.widget import Widget


class DashboardListItem(RedashModel):
    """Dashboard summary returned by ``GET /api/dashboards``."""

    id: int
    name: str
    slug: str

    layout: NullableList[Any] = []  # opaque, not interpreted

    is_favorite: bool = False
    is_archived: bool = False
    is_draft: bool = False
    dashboard_filters_enabled: bool = False
    version: int = 1

    user_id: int | None = None
    user: User | None = None
    tags: NullableList[str] = []

    created_at: datetime | None = None
    updated_at: datetime | None = None


class Dashboard(DashboardListItem):
    """Full dashboard returned by ``GET /api/dashboards/<slug>``."""

    widgets: NullableList[Widget] = []
    public_url: str | None = None
    api_key: str | None = None
    can_edit: bool | None = None


class DashboardList(PageMeta):
    """One page of ``GET /api/dashboards``."""

    results: list[DashboardListItem]


class DashboardCreate(RedashModel):
    """Request body for ``POST /api/dashboards``."""

    name: str
    slug: str | None = None
    is_favorite: bool | None = None
    is_draft: bool | None = None
    is_archived: bool | None = None
    dashboard_filters_enabled: bool | None = None
    tags: list[str] | None = None


class DashboardUpdate(RedashModel):
    """Request body for ``POST /api/dashboards/<id>``. Unset fields are left unchanged.

    Sending ``version`` lets the service reject the update with HTTP 409
    when the dashboard changed since it was read.
    """

    name: str | None = None
    slug: str | None = None
    layout: list[Any] | None = None
    is_favorite: bool | None = None
    is_archived: bool | None = None
    is_draft: bool | None = None
    dashboard_filters_enabled: bool | None = None
    tags: list[str] | None = None
    version: int | None = None
