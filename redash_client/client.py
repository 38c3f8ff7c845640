"""Entry point composing the transport, pipeline and resource services."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from redash_client.config import Settings, get_settings
from redash_client.models.visualization import Visualization
from redash_client.models.widget import Widget
from redash_client.repositories.transport import BaseTransport, HttpTransport
from redash_client.services.dashboards import DashboardService
from redash_client.services.pipeline import RequestPipeline
from redash_client.services.queries import QueryService
from redash_client.services.resolver import Resolver
from redash_client.services.visualizations import VisualizationService
from redash_client.services.widgets import WidgetService

logger = logging.getLogger(__name__)


class RedashClient:
    """Typed client for the Redash dashboards/queries/visualizations/widgets API.

    Every operation is one synchronous round trip; widget and visualization
    reads fetch their whole parent. The instance is not mutated after
    construction and can be shared between threads.

    Usage::

        with RedashClient.from_settings() as client:
            dashboard = client.dashboards.get("sales")
            widget = client.widgets.get("sales", dashboard.widgets[0].id)
    """

    def __init__(self, transport: BaseTransport) -> None:
        self.transport = transport
        pipeline = RequestPipeline(transport)
        self.dashboards = DashboardService(pipeline)
        self.queries = QueryService(pipeline)
        self.resolver = Resolver(self.dashboards, self.queries)
        self.visualizations = VisualizationService(pipeline, self.resolver)
        self.widgets = WidgetService(pipeline, self.resolver)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> RedashClient:
        """Build a client with an authenticated httpx transport from *settings*.

        Defaults to the cached environment settings (``REDASH_*`` variables).
        """
        settings = settings or get_settings()
        http_client = httpx.Client(
            base_url=settings.url.rstrip("/"),
            headers={
                "Authorization": f"Key {settings.api_key.get_secret_value()}",
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
            timeout=settings.timeout,
            verify=settings.verify_tls,
        )
        logger.info("Redash client configured for %s", settings.url)
        return cls(HttpTransport(http_client))

    # ------------------------------------------------------------------
    # Resolver shortcuts
    # ------------------------------------------------------------------

    def resolve_visualization(
        self, query_id: int, visualization_id: int
    ) -> Visualization:
        return self.resolver.resolve_visualization(query_id, visualization_id)

    def resolve_widget(self, dashboard_slug: str, widget_id: int) -> Widget:
        return self.resolver.resolve_widget(dashboard_slug, widget_id)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the transport and its pooled connections."""
        self.transport.close()

    def __enter__(self) -> RedashClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
