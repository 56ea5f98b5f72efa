"""Fixtures compartidas: un daemon falso sobre `httpx.MockTransport`."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from particlrpc import ParticlRpc, RpcConfig

Responder = Callable[[httpx.Request], httpx.Response]


class Recorder:
    """Handler de `MockTransport` que guarda cada petición recibida."""

    def __init__(self, responder: Responder) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture
def reply() -> Callable[..., Responder]:
    def _reply(result: Any = None, error: Any = "", *, status: int = 200) -> Responder:
        def responder(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json={"result": result, "error": error, "id": 2})

        return responder

    return _reply


@pytest.fixture
def make_rpc():
    clients: list[httpx.Client] = []

    def _make(responder: Responder, *, config: RpcConfig | None = None, **kwargs: Any):
        recorder = Recorder(responder)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        config = config or RpcConfig(auth_token="__cookie__:secret")
        return ParticlRpc(config, http_client=client, **kwargs), recorder

    yield _make

    for client in clients:
        client.close()
