"""Exception hierarchy raised by the Redash client.

Every failure surfaces as a subclass of :class:`RedashClientError` so callers
can tell transport, HTTP, decoding, lookup and input problems apart without
inspecting messages.
"""

from __future__ import annotations

from typing import Any


class RedashClientError(Exception):
    """Base class for all client errors."""


class ValidationError(RedashClientError):
    """Caller input rejected before any request was sent (negative id, empty slug)."""


class TransportError(RedashClientError):
    """The request never produced an HTTP response (connection, TLS, timeout).

    The underlying ``httpx`` exception is chained as ``__cause__``.
    """

    def __init__(self, method: str, path: str, reason: str) -> None:
        self.method = method
        self.path = path
        self.reason = reason
        super().__init__(f"{method} {path} failed: {reason}")


class HTTPStatusError(RedashClientError):
    """The service answered with a non-2xx status.

    ``body`` keeps the raw response bytes for diagnostics.
    """

    def __init__(
        self,
        status_code: int | None,
        body: bytes = b"",
        method: str | None = None,
        path: str | None = None,
        message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path
        if message is None:
            message = f"{method} {path} returned HTTP {status_code}"
        super().__init__(message)


class NotFoundError(HTTPStatusError):
    """A resource does not exist.

    Raised either for an HTTP 404 (``status_code == 404``) or by the resolver
    when a sub-resource is missing from its parent's embedded collection
    (``status_code is None`` and ``parent`` set).
    """

    def __init__(
        self,
        resource: str,
        identifier: int | str,
        parent: int | str | None = None,
        status_code: int | None = None,
        body: bytes = b"",
        method: str | None = None,
        path: str | None = None,
    ) -> None:
        self.resource = resource
        self.identifier = identifier
        self.parent = parent
        if parent is None:
            message = f"{resource} {identifier!r} not found"
        else:
            message = f"{resource} {identifier!r} not found in {parent!r}"
        super().__init__(
            status_code, body=body, method=method, path=path, message=message
        )


class DecodeError(RedashClientError):
    """A response body was not valid JSON or did not match the expected schema."""

    def __init__(self, model: str, errors: list[dict[str, Any]]) -> None:
        self.model = model
        self.errors = errors
        first = errors[0]["msg"] if errors else "invalid payload"
        super().__init__(
            f"Could not decode {model}: {first} ({len(errors)} error(s))"
        )
