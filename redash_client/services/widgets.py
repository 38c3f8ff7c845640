"""Widget operations. Reads go through the owning dashboard."""

from __future__ import annotations

from redash_client.models.widget import Widget, WidgetCreate, WidgetUpdate
from redash_client.services.pipeline import RequestPipeline
from redash_client.services.request_builder import build_target, validate_id
from redash_client.services.resolver import Resolver


class WidgetService:
    BASE_PATH = "/api/widgets"
    RESOURCE = "widget"

    def __init__(self, pipeline: RequestPipeline, resolver: Resolver) -> None:
        self.pipeline = pipeline
        self.resolver = resolver

    def get(self, dashboard_slug: str, widget_id: int) -> Widget:
        """Return widget *widget_id* of dashboard *dashboard_slug*.

        Costs one full dashboard fetch; see :mod:`redash_client.services.resolver`.
        """
        return self.resolver.resolve_widget(dashboard_slug, widget_id)

    def create(self, payload: WidgetCreate) -> Widget:
        target = build_target(self.BASE_PATH)
        return self.pipeline.post(target, payload, Widget, self.RESOURCE)

    def update(self, widget_id: int, payload: WidgetUpdate) -> Widget:
        target = build_target(self.BASE_PATH, validate_id(widget_id, "widget_id"))
        return self.pipeline.post(target, payload, Widget, self.RESOURCE)

    def delete(self, widget_id: int) -> None:
        """Remove the widget from its dashboard permanently."""
        target = build_target(self.BASE_PATH, validate_id(widget_id, "widget_id"))
        self.pipeline.delete(target, self.RESOURCE)
