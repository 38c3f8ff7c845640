"""Tests for widget operations."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from conftest import FakeRedash
from redash_client.client import RedashClient
from redash_client.errors import NotFoundError
from redash_client.models.widget import (
    WidgetCreate,
    WidgetOptions,
    WidgetParameterMapping,
    WidgetPosition,
    WidgetUpdate,
)


class TestGetWidget:
    def test_get_goes_through_the_owning_dashboard(
        self,
        client: RedashClient,
        fake_redash: FakeRedash,
        dashboard_payload: dict[str, Any],
    ) -> None:
        fake_redash.add("GET", "/api/dashboards/sales", dashboard_payload)

        widget = client.widgets.get("sales", 102)

        assert widget.dashboard_id == 7
        assert widget.visualization.id == 2
        assert widget.visualization.query.name == "Revenue by region"
        assert widget.visualization.query.last_modified_by.name == "Ana Ruiz"
        mappings = widget.options.parameter_mappings
        assert mappings["since"].type == "dashboard-level"
        assert mappings["since"].map_to == "since"
        assert mappings["region"].type == "static-value"
        assert mappings["region"].value == "APAC"
        assert widget.options.position.min_size_y == 5
        assert [r.url.path for r in fake_redash.requests] == ["/api/dashboards/sales"]

    def test_widget_missing_from_dashboard(
        self,
        client: RedashClient,
        fake_redash: FakeRedash,
        dashboard_payload: dict[str, Any],
    ) -> None:
        fake_redash.add("GET", "/api/dashboards/sales", dashboard_payload)

        with pytest.raises(NotFoundError) as excinfo:
            client.widgets.get("sales", 999)
        assert excinfo.value.resource == "widget"
        assert excinfo.value.parent == "sales"
        assert excinfo.value.status_code is None

    def test_missing_dashboard_surfaces_dashboard_not_found(
        self, client: RedashClient
    ) -> None:
        with pytest.raises(NotFoundError) as excinfo:
            client.widgets.get("nope", 1)
        assert excinfo.value.resource == "dashboard"
        assert excinfo.value.status_code == 404


class TestWriteWidget:
    def test_create_visualization_widget(
        self, client: RedashClient, fake_redash: FakeRedash
    ) -> None:
        def create(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"id": 500, **json.loads(request.content)})

        fake_redash.add("POST", "/api/widgets", handler=create)

        widget = client.widgets.create(
            WidgetCreate(
                dashboard_id=7,
                visualization_id=2,
                width=1,
                options=WidgetOptions(
                    position=WidgetPosition(col=3, row=2, size_x=3, size_y=8),
                    parameter_mappings={
                        "since": WidgetParameterMapping(
                            name="since", type="dashboard-level", map_to="since"
                        )
                    },
                ),
            )
        )

        assert fake_redash.sent_json() == {
            "dashboard_id": 7,
            "visualization_id": 2,
            "width": 1,
            "options": {
                "position": {"col": 3, "row": 2, "sizeX": 3, "sizeY": 8},
                "parameterMappings": {
                    "since": {"name": "since", "type": "dashboard-level", "mapTo": "since"}
                },
            },
        }
        assert widget.id == 500
        assert widget.options.position.col == 3

    def test_create_text_widget_omits_visualization_reference(
        self, client: RedashClient, fake_redash: FakeRedash
    ) -> None:
        def create(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"id": 501, **json.loads(request.content)})

        fake_redash.add("POST", "/api/widgets", handler=create)

        widget = client.widgets.create(WidgetCreate(dashboard_id=7, text="# Notes"))

        assert fake_redash.sent_json() == {"dashboard_id": 7, "text": "# Notes"}
        assert widget.is_text_box

    def test_update_and_delete(
        self, client: RedashClient, fake_redash: FakeRedash
    ) -> None:
        fake_redash.add(
            "POST",
            "/api/widgets/101",
            {"id": 101, "dashboard_id": 7, "text": "Updated", "width": 1},
        )
        fake_redash.add("DELETE", "/api/widgets/101", status=200)

        updated = client.widgets.update(101, WidgetUpdate(text="Updated"))
        client.widgets.delete(101)

        assert updated.text == "Updated"
        assert fake_redash.sent_json(0) == {"text": "Updated"}
        assert [(r.method, r.url.path) for r in fake_redash.requests] == [
            ("POST", "/api/widgets/101"),
            ("DELETE", "/api/widgets/101"),
        ]
