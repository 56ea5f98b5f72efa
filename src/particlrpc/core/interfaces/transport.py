"""Contrato del transporte RPC.

Por qué Protocol:
- La fachada de comandos solo necesita "enviar método + params y recibir un
  resultado tipado"; no le importa si debajo hay httpx, un stub o un fake.
- Permite testear `ParticlRpc` sin levantar un servidor HTTP.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RpcTransport(Protocol):
    """Contrato mínimo para ejecutar un comando en el daemon.

    Reglas de diseño:
    - `post` es bloqueante: una petición, una respuesta.
    - `wallet` vacío => comando no asociado a ninguna wallet.
    - Los fallos se reportan con subclases de `ParticlRpcError`.
    """

    def post(self, method: str, wallet: str, params: Sequence[Any], result_type: type[T]) -> T:
        ...
