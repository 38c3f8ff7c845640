"""HTTP transport boundary backed by httpx."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from redash_client.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status and fully-read body of one HTTP exchange."""

    status_code: int
    content: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class BaseTransport(ABC):
    """Performs one HTTP request against the Redash base URL.

    Implementations own TLS, authentication, pooling and timeouts. They must
    return the complete body (the connection is released before returning)
    and raise :class:`TransportError` when no response was received.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
    ) -> TransportResponse:
        ...

    def close(self) -> None:
        """Release pooled connections. Default is a no-op."""


class HttpTransport(BaseTransport):
    """Transport over an injected :class:`httpx.Client`.

    The client carries the base URL, auth headers and timeout configuration.
    ``httpx.Client`` is thread-safe, so one transport can serve concurrent
    callers.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
    ) -> TransportResponse:
        try:
            with self._client.stream(
                method, path, params=params, json=json_body
            ) as response:
                content = response.read()
        except httpx.HTTPError as exc:
            raise TransportError(method, path, str(exc) or type(exc).__name__) from exc

        logger.debug(
            "%s %s -> %s (%d bytes)",
            method,
            response.request.url,
            response.status_code,
            len(content),
        )
        return TransportResponse(status_code=response.status_code, content=content)

    def close(self) -> None:
        self._client.close()
