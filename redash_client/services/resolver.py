"""Lookup of sub-resources that have no direct read endpoint.

The service exposes visualizations only inside their query and widgets only
inside their dashboard. Resolving one therefore costs a full fetch of the
parent plus a linear scan of its embedded list. Nothing is cached: callers
that need several children of the same parent should fetch the parent once
and use :func:`find_visualization` / :func:`find_widget` on it.
"""

from __future__ import annotations

import logging

from redash_client.errors import NotFoundError
from redash_client.models.dashboard import Dashboard
from redash_client.models.query import Query
from redash_client.models.visualization import Visualization
from redash_client.models.widget import Widget
from redash_client.services.dashboards import DashboardService
from redash_client.services.queries import QueryService
from redash_client.services.request_builder import validate_id

logger = logging.getLogger(__name__)


def find_visualization(query: Query, visualization_id: int) -> Visualization:
    """Return the first visualization of *query* with *visualization_id*."""
    for visualization in query.visualizations:
        if visualization.id == visualization_id:
            return visualization
    raise NotFoundError("visualization", visualization_id, parent=query.id)


def find_widget(dashboard: Dashboard, widget_id: int) -> Widget:
    """Return the first widget of *dashboard* with *widget_id*."""
    for widget in dashboard.widgets:
        if widget.id == widget_id:
            return widget
    raise NotFoundError("widget", widget_id, parent=dashboard.slug)


class Resolver:
    """Fetches a parent resource and scans its embedded collection."""

    def __init__(self, dashboards: DashboardService, queries: QueryService) -> None:
        self.dashboards = dashboards
        self.queries = queries

    def resolve_visualization(
        self, query_id: int, visualization_id: int
    ) -> Visualization:
        """Fetch query *query_id* and return its visualization *visualization_id*.

        A missing query raises the query's own :class:`NotFoundError`; a
        missing visualization raises one with ``parent`` set to *query_id*.
        """
        validate_id(visualization_id, "visualization_id")
        query = self.queries.get(query_id)
        logger.debug(
            "Scanning %d visualization(s) of query %s for %s",
            len(query.visualizations),
            query_id,
            visualization_id,
        )
        return find_visualization(query, visualization_id)

    def resolve_widget(self, dashboard_slug: str, widget_id: int) -> Widget:
        """Fetch dashboard *dashboard_slug* and return its widget *widget_id*."""
        validate_id(widget_id, "widget_id")
        dashboard = self.dashboards.get(dashboard_slug)
        logger.debug(
            "Scanning %d widget(s) of dashboard %s for %s",
            len(dashboard.widgets),
            dashboard_slug,
            widget_id,
        )
        return find_widget(dashboard, widget_id)
