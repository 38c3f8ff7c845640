"""Request target construction for every Redash resource path.

All caller-supplied identifiers are validated here, before anything reaches
the transport: numeric ids must be non-negative integers and slugs must be
non-empty strings.
"""

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, urlencode

from redash_client.errors import ValidationError


@dataclass(frozen=True)
class RequestTarget:
    """Path plus query parameters for one request.

    ``identifier`` is the id or slug addressed by the path, if any.
    """

    path: str
    params: dict[str, Any] = field(default_factory=dict)
    identifier: int | str | None = None

    @property
    def url(self) -> str:
        """Path with the encoded query string appended."""
        if not self.params:
            return self.path
        return f"{self.path}?{urlencode(self.params)}"


def validate_id(value: Any, name: str = "id") -> int:
    """Return *value* if it is a non-negative integer, else raise ValidationError."""
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def validate_slug(value: Any, name: str = "slug") -> str:
    """Return *value* if it is a non-empty string, else raise ValidationError."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} must be a non-empty string, got {value!r}")
    return value


def page_params(page: int | None = None, page_size: int | None = None) -> dict[str, int]:
    """Build ``page``/``page_size`` query parameters. Unset values are omitted."""
    params: dict[str, int] = {}
    for name, value in (("page", page), ("page_size", page_size)):
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValidationError(f"{name} must be a positive integer, got {value!r}")
        params[name] = value
    return params


def build_target(
    base_path: str,
    identifier: int | str | None = None,
    params: dict[str, Any] | None = None,
) -> RequestTarget:
    """Build the target for *base_path*, optionally addressing one item.

    Integer identifiers are validated as ids, strings as slugs (URL-quoted).
    Parameters whose value is ``None`` are dropped.
    """
    path = base_path.rstrip("/")
    if identifier is not None:
        if isinstance(identifier, str):
            segment = quote(validate_slug(identifier), safe="")
        else:
            segment = str(validate_id(identifier))
        path = f"{path}/{segment}"

    query = {k: v for k, v in (params or {}).items() if v is not None}
    return RequestTarget(path=path, params=query, identifier=identifier)
