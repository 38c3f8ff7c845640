"""Request/response pipeline shared by all resource services.

Combines a request target, an optional encoded payload and the transport,
then turns the response into a typed model or a typed error.
"""

from __future__ import annotations

from pydantic import BaseModel

from redash_client.errors import HTTPStatusError, NotFoundError
from redash_client.repositories.transport import BaseTransport, TransportResponse
from redash_client.services.codec import ModelT, decode_response, encode_payload
from redash_client.services.request_builder import RequestTarget


class RequestPipeline:
    """Sends requests through *transport* and decodes their responses.

    Holds nothing but the transport handle; safe to share between threads.
    """

    def __init__(self, transport: BaseTransport) -> None:
        self.transport = transport

    def get(
        self, target: RequestTarget, model: type[ModelT], resource: str
    ) -> ModelT:
        response = self._send("GET", target, resource)
        return decode_response(model, response.content)

    def post(
        self,
        target: RequestTarget,
        payload: BaseModel,
        model: type[ModelT],
        resource: str,
    ) -> ModelT:
        response = self._send("POST", target, resource, encode_payload(payload))
        return decode_response(model, response.content)

    def delete(self, target: RequestTarget, resource: str) -> None:
        """Send a DELETE. The response body, if any, is discarded."""
        self._send("DELETE", target, resource)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _send(
        self,
        method: str,
        target: RequestTarget,
        resource: str,
        body: dict | None = None,
    ) -> TransportResponse:
        response = self.transport.request(
            method, target.path, params=target.params or None, json_body=body
        )
        if response.is_success:
            return response

        if response.status_code == 404:
            raise NotFoundError(
                resource,
                target.identifier if target.identifier is not None else target.path,
                status_code=404,
                body=response.content,
                method=method,
                path=target.url,
            )
        raise HTTPStatusError(
            response.status_code,
            body=response.content,
            method=method,
            path=target.url,
        )
