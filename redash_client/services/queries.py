"""Query operations: list, get, create, update, archive."""

from __future__ import annotations

from redash_client.models.query import Query, QueryCreate, QueryList, QueryUpdate
from redash_client.services.pipeline import RequestPipeline
from redash_client.services.request_builder import (
    build_target,
    page_params,
    validate_id,
)


class QueryService:
    BASE_PATH = "/api/queries"
    RESOURCE = "query"

    def __init__(self, pipeline: RequestPipeline) -> None:
        self.pipeline = pipeline

    def list(
        self, page: int | None = None, page_size: int | None = None
    ) -> QueryList:
        """Return one page of queries. Further pages need further calls."""
        target = build_target(self.BASE_PATH, params=page_params(page, page_size))
        return self.pipeline.get(target, QueryList, self.RESOURCE)

    def get(self, query_id: int) -> Query:
        """Return the query with *query_id*, including its visualizations."""
        target = build_target(self.BASE_PATH, validate_id(query_id, "query_id"))
        return self.pipeline.get(target, Query, self.RESOURCE)

    def create(self, payload: QueryCreate) -> Query:
        target = build_target(self.BASE_PATH)
        return self.pipeline.post(target, payload, Query, self.RESOURCE)

    def update(self, query_id: int, payload: QueryUpdate) -> Query:
        target = build_target(self.BASE_PATH, validate_id(query_id, "query_id"))
        return self.pipeline.post(target, payload, Query, self.RESOURCE)

    def archive(self, query_id: int) -> None:
        """Archive the query. The service keeps the record, flagged archived."""
        target = build_target(self.BASE_PATH, validate_id(query_id, "query_id"))
        self.pipeline.delete(target, self.RESOURCE)
