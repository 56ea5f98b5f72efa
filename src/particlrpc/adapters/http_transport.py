"""Transporte JSON-RPC sobre HTTP (httpx).

Una llamada = un POST bloqueante a `http://<host>:<port>[/wallet/<wallet>]`.

Cliente HTTP:
- Si el caller inyecta un `httpx.Client`, se reutiliza (pooling/timeouts los
  controla el caller, y también su cierre).
- Si no, se crea un cliente ad hoc por llamada y se cierra al salir, también
  cuando falla la decodificación.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

import httpx

from particlrpc.adapters.http_client import build_client
from particlrpc.core.codec import RpcErrorObject, decode_response, encode_request, parse_envelope
from particlrpc.core.config import HttpSettings, RpcConfig
from particlrpc.core.errors import DecodeError, HttpStatusError, TransportError

T = TypeVar("T")

logger = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


def _rpc_message(body: bytes) -> str | None:
    """Mensaje de error JSON-RPC dentro de una respuesta no-200, si lo hay."""

    if not body:
        return None
    try:
        envelope = parse_envelope(body)
    except DecodeError:
        return None
    if isinstance(envelope.error, RpcErrorObject):
        return envelope.error.message or None
    return envelope.error or None


class HttpTransport:
    """Implementación de `RpcTransport` con httpx."""

    def __init__(
        self,
        config: RpcConfig,
        *,
        client: httpx.Client | None = None,
        settings: HttpSettings | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._settings = settings

    def post(self, method: str, wallet: str, params: Sequence[Any], result_type: type[T]) -> T:
        body = encode_request(method, list(params))
        url = self._config.base_url(wallet)

        if self._client is not None:
            response = self._send(self._client, url, body, method)
        else:
            with build_client(self._settings) as client:
                response = self._send(client, url, body, method)

        logger.debug("%s -> HTTP %s (%d bytes)", method, response.status_code, len(response.content))

        if response.status_code != httpx.codes.OK:
            raise HttpStatusError(
                response.status_code,
                response.reason_phrase,
                rpc_message=_rpc_message(response.content),
            )

        return decode_response(response.content, result_type)

    def _send(self, client: httpx.Client, url: str, body: bytes, method: str) -> httpx.Response:
        kwargs: dict[str, Any] = {"content": body, "headers": _HEADERS}
        credentials = self._config.credentials()
        if credentials is not None:
            kwargs["auth"] = httpx.BasicAuth(*credentials)

        logger.debug("POST %s method=%s", url, method)
        try:
            return client.post(url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Post failed: {exc}") from exc
