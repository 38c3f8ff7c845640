"""Tests for visualization operations."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from conftest import FakeRedash
from redash_client.client import RedashClient
from redash_client.errors import NotFoundError
from redash_client.models.visualization import (
    ChartOptions,
    TableOptions,
    UnknownOptions,
    VisualizationCreate,
    VisualizationUpdate,
)


def _echo(visualization_id: int):
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        body.pop("query_id", None)
        return httpx.Response(200, json={"id": visualization_id, **body})

    return handler


class TestVisualizations:
    def test_get_goes_through_the_owning_query(
        self,
        client: RedashClient,
        fake_redash: FakeRedash,
        query_payload: dict[str, Any],
    ) -> None:
        fake_redash.add("GET", "/api/queries/42", query_payload)

        visualization = client.visualizations.get(42, 2)

        assert visualization.id == 2
        assert visualization.name == "Revenue trend"
        assert isinstance(visualization.options, ChartOptions)
        assert [(r.method, r.url.path) for r in fake_redash.requests] == [
            ("GET", "/api/queries/42")
        ]

    def test_create_encodes_typed_options(
        self, client: RedashClient, fake_redash: FakeRedash
    ) -> None:
        fake_redash.add("POST", "/api/visualizations", handler=_echo(301))

        created = client.visualizations.create(
            VisualizationCreate(
                query_id=42,
                type="TABLE",
                name="Top regions",
                options=TableOptions(items_per_page=50),
            )
        )

        assert fake_redash.sent_json() == {
            "query_id": 42,
            "type": "TABLE",
            "name": "Top regions",
            "options": {"itemsPerPage": 50},
        }
        assert created.id == 301
        assert isinstance(created.options, TableOptions)
        assert created.options.items_per_page == 50

    def test_create_with_raw_options_for_unmodelled_type(
        self, client: RedashClient, fake_redash: FakeRedash
    ) -> None:
        fake_redash.add("POST", "/api/visualizations", handler=_echo(302))

        created = client.visualizations.create(
            VisualizationCreate(
                query_id=42,
                type="COUNTER",
                name="Total revenue",
                options={"counterColName": "revenue", "rowNumber": 1},
            )
        )

        assert fake_redash.sent_json()["options"] == {
            "counterColName": "revenue",
            "rowNumber": 1,
        }
        assert isinstance(created.options, UnknownOptions)
        assert created.options.raw["counterColName"] == "revenue"

    def test_update_posts_to_item_path(
        self, client: RedashClient, fake_redash: FakeRedash
    ) -> None:
        def update(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"id": 2, "type": "CHART", "name": "Revenue trend", **json.loads(request.content)},
            )

        fake_redash.add("POST", "/api/visualizations/2", handler=update)

        updated = client.visualizations.update(
            2, VisualizationUpdate(description="Stacked, EUR")
        )

        assert fake_redash.sent_json() == {"description": "Stacked, EUR"}
        assert updated.description == "Stacked, EUR"

    def test_delete_is_permanent(
        self, client: RedashClient, fake_redash: FakeRedash
    ) -> None:
        deleted: list[int] = []

        def delete(request: httpx.Request) -> httpx.Response:
            if deleted:
                return httpx.Response(404)
            deleted.append(2)
            return httpx.Response(200)

        fake_redash.add("DELETE", "/api/visualizations/2", handler=delete)

        client.visualizations.delete(2)
        with pytest.raises(NotFoundError) as excinfo:
            client.visualizations.delete(2)
        assert excinfo.value.resource == "visualization"
        assert excinfo.value.identifier == 2
