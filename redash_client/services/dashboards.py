"""Dashboard operations: list, get by slug, create, update, archive."""

from __future__ import annotations

from redash_client.models.dashboard import (
    Dashboard,
    DashboardCreate,
    DashboardList,
    DashboardUpdate,
)
from redash_client.services.pipeline import RequestPipeline
from redash_client.services.request_builder import (
    build_target,
    page_params,
    validate_id,
    validate_slug,
)


class DashboardService:
    """Dashboards are read and archived by slug but updated by numeric id."""

    BASE_PATH = "/api/dashboards"
    RESOURCE = "dashboard"

    def __init__(self, pipeline: RequestPipeline) -> None:
        self.pipeline = pipeline

    def list(
        self, page: int | None = None, page_size: int | None = None
    ) -> DashboardList:
        """Return one page of dashboards. Further pages need further calls."""
        target = build_target(self.BASE_PATH, params=page_params(page, page_size))
        return self.pipeline.get(target, DashboardList, self.RESOURCE)

    def get(self, slug: str) -> Dashboard:
        """Return the dashboard with *slug*, including its widgets."""
        target = build_target(self.BASE_PATH, validate_slug(slug))
        return self.pipeline.get(target, Dashboard, self.RESOURCE)

    def create(self, payload: DashboardCreate) -> Dashboard:
        target = build_target(self.BASE_PATH)
        return self.pipeline.post(target, payload, Dashboard, self.RESOURCE)

    def update(self, dashboard_id: int, payload: DashboardUpdate) -> Dashboard:
        target = build_target(
            self.BASE_PATH, validate_id(dashboard_id, "dashboard_id")
        )
        return self.pipeline.post(target, payload, Dashboard, self.RESOURCE)

    def archive(self, slug: str) -> None:
        """Archive the dashboard. The service keeps the record, flagged archived."""
        target = build_target(self.BASE_PATH, validate_slug(slug))
        self.pipeline.delete(target, self.RESOURCE)
