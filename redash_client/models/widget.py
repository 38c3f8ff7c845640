"""Pydantic models for dashboard widgets.

Widgets have no standalone read endpoint; they only arrive embedded in a
dashboard's ``widgets`` list.
"""

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from redash_client.models.common import RedashModel, User
from redash_client.models.query import QueryListItem
from redash_client.models.visualization import Visualization


class WidgetParameterMapping(RedashModel):
    """Binds a visualization parameter for one widget.

    ``type`` is ``dashboard-level`` (``map_to`` names the shared dashboard
    parameter), ``widget-level`` or ``static-value`` (``value`` is used).
    """

    name: str
    type: str
    map_to: str | None = Field(None, alias="mapTo")
    value: Any = None
    title: str | None = None


class WidgetPosition(RedashModel):
    """Grid placement and size bounds of a widget."""

    col: int | None = None
    row: int | None = None
    size_x: int | None = Field(None, alias="sizeX")
    size_y: int | None = Field(None, alias="sizeY")
    min_size_x: int | None = Field(None, alias="minSizeX")
    max_size_x: int | None = Field(None, alias="maxSizeX")
    min_size_y: int | None = Field(None, alias="minSizeY")
    max_size_y: int | None = Field(None, alias="maxSizeY")
    auto_height: bool | None = Field(None, alias="autoHeight")


class WidgetOptions(RedashModel):
    model_config = ConfigDict(extra="allow")

    is_hidden: bool | None = Field(None, alias="isHidden")
    position: WidgetPosition | None = None
    parameter_mappings: dict[str, WidgetParameterMapping] | None = Field(
        None, alias="parameterMappings"
    )


class WidgetQuery(QueryListItem):
    """Query summary embedded in a widget's visualization."""

    last_modified_by: User | None = None


class WidgetVisualization(Visualization):
    """Visualization as embedded in a widget, carrying its owning query."""

    query: WidgetQuery | None = None


class Widget(RedashModel):
    """Widget as embedded in ``Dashboard.widgets``.

    A widget shows either free ``text`` or a ``visualization``.
    """

    id: int
    dashboard_id: int
    text: str | None = None
    width: int | None = None
    visualization: WidgetVisualization | None = None
    options: WidgetOptions = Field(default_factory=WidgetOptions)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_text_box(self) -> bool:
        return self.visualization is None


class WidgetCreate(RedashModel):
    """Request body for ``POST /api/widgets``."""

    dashboard_id: int
    visualization_id: int | None = None
    text: str | None = None
    width: int | None = None
    options: WidgetOptions | None = None


class WidgetUpdate(RedashModel):
    """Request body for ``POST /api/widgets/<id>``. Unset fields are left unchanged."""

    visualization_id: int | None = None
    text: str | None = None
    width: int | None = None
    options: WidgetOptions | None = None
