"""JSON encoding of request payloads and strict decoding of responses."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from redash_client.errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode_payload(payload: BaseModel) -> dict[str, Any]:
    """Serialize *payload* to a JSON-ready dict using wire names.

    Only fields the caller set are included: an unset optional field is
    omitted ("no change"), an explicit ``None`` is sent as ``null``.
    """
    return payload.model_dump(mode="json", by_alias=True, exclude_unset=True)


def decode_response(model: type[ModelT], content: bytes) -> ModelT:
    """Decode a JSON body into *model* without type coercion.

    Raises :class:`DecodeError` for malformed JSON, missing required fields
    or wire types that disagree with the schema (``"7"`` for an ``int``).
    """
    try:
        return model.model_validate_json(content, strict=True)
    except PydanticValidationError as exc:
        raise DecodeError(model.__name__, exc.errors(include_url=False)) from exc
