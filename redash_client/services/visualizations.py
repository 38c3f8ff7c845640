"""Visualization operations. Reads go through the owning query."""

from __future__ import annotations

from redash_client.models.visualization import (
    Visualization,
    VisualizationCreate,
    VisualizationUpdate,
)
from redash_client.services.pipeline import RequestPipeline
from redash_client.services.request_builder import build_target, validate_id
from redash_client.services.resolver import Resolver


class VisualizationService:
    BASE_PATH = "/api/visualizations"
    RESOURCE = "visualization"

    def __init__(self, pipeline: RequestPipeline, resolver: Resolver) -> None:
        self.pipeline = pipeline
        self.resolver = resolver

    def get(self, query_id: int, visualization_id: int) -> Visualization:
        """Return visualization *visualization_id* of query *query_id*.

        Costs one full query fetch; see :mod:`redash_client.services.resolver`.
        """
        return self.resolver.resolve_visualization(query_id, visualization_id)

    def create(self, payload: VisualizationCreate) -> Visualization:
        target = build_target(self.BASE_PATH)
        return self.pipeline.post(target, payload, Visualization, self.RESOURCE)

    def update(
        self, visualization_id: int, payload: VisualizationUpdate
    ) -> Visualization:
        target = build_target(
            self.BASE_PATH, validate_id(visualization_id, "visualization_id")
        )
        return self.pipeline.post(target, payload, Visualization, self.RESOURCE)

    def delete(self, visualization_id: int) -> None:
        """Delete the visualization permanently."""
        target = build_target(
            self.BASE_PATH, validate_id(visualization_id, "visualization_id")
        )
        self.pipeline.delete(target, self.RESOURCE)
