"""Codec del sobre JSON-RPC.

Petición: `{"method": ..., "id": 2, "params": [...]}`.
Respuesta: `{"result": ..., "error": ..., "id": ...}`.

La decodificación es paramétrica: el caller indica el tipo del resultado y el
`result` se valida contra él con un `TypeAdapter`. Si el daemon reporta un
error, el `result` se descarta sin validarlo.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any, TypeVar, get_origin

from pydantic import BaseModel, Field, TypeAdapter, ValidationError
from pydantic.config import ConfigDict
from pydantic_core import PydanticSerializationError

from particlrpc.core.errors import DecodeError, EncodeError, RpcError

T = TypeVar("T")

REQUEST_ID = 2


class RpcRequest(BaseModel):
    method: str = Field(..., min_length=1)
    id: int = REQUEST_ID
    params: list[Any] = Field(default_factory=list)


class RpcErrorObject(BaseModel):
    """Forma `{"code": -5, "message": "..."}` que usa particld."""

    model_config = ConfigDict(extra="ignore")

    code: int | None = None
    message: str = ""


class RpcResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    result: Any = None
    error: str | RpcErrorObject | None = None
    id: int | str | None = None

    def raise_for_error(self) -> None:
        if isinstance(self.error, RpcErrorObject):
            raise RpcError(self.error.message or "Unknown error", code=self.error.code)
        if self.error:
            raise RpcError(self.error)


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def _check_finite(value: Any) -> None:
    """JSON no admite NaN/Infinity; Pydantic los escribiría como `null`."""

    if isinstance(value, BaseModel):
        value = value.model_dump()
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"non-finite float {value!r} is not valid JSON")
    if isinstance(value, dict):
        for item in value.values():
            _check_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _check_finite(item)


def _zero_value(result_type: Any) -> Any:
    """Valor "vacío" de `result_type` para un `result` nulo (None si no hay uno obvio)."""

    origin = get_origin(result_type) or result_type
    if not isinstance(origin, type):
        return None
    if issubclass(origin, (BaseModel, dict)):
        return {}
    if issubclass(origin, (list, tuple, set, frozenset)):
        return []
    if issubclass(origin, (bool, int, float, str)):
        return origin()
    return None


def encode_request(method: str, params: list[Any] | tuple[Any, ...] | None = None) -> bytes:
    """Serializa la petición. Los modelos Pydantic dentro de `params` se vuelcan por nombre de campo."""

    try:
        request = RpcRequest(method=method, params=list(params or ()))
        _check_finite(request.params)
        return request.model_dump_json(by_alias=True).encode("utf-8")
    except (ValidationError, PydanticSerializationError, ValueError) as exc:
        raise EncodeError(f"JSON encode failed for {method}: {exc}") from exc


def parse_envelope(data: bytes | str) -> RpcResponse:
    try:
        return RpcResponse.model_validate_json(data)
    except ValidationError as exc:
        raise DecodeError(f"Invalid JSON-RPC response: {exc}") from exc


def decode_response(data: bytes | str, result_type: type[T]) -> T:
    """Decodifica el sobre y devuelve `result` validado como `result_type`.

    Raises:
    - `DecodeError`: JSON inválido o `result` que no encaja con `result_type`.
      Un `result` nulo se decodifica como el valor cero del tipo (`{}` para
      modelos, `0`, `""`, `[]`), si el tipo no admite `None`.
    - `RpcError`: el campo `error` no está vacío (sin importar `result`).
    """

    envelope = parse_envelope(data)
    envelope.raise_for_error()
    adapter = _adapter(result_type)
    try:
        if envelope.result is None:
            try:
                return adapter.validate_python(None)
            except ValidationError:
                # Un `result` nulo deja el destino en su valor cero.
                return adapter.validate_python(_zero_value(result_type))
        return adapter.validate_python(envelope.result)
    except ValidationError as exc:
        name = getattr(result_type, "__name__", repr(result_type))
        raise DecodeError(f"Unexpected result shape for {name}: {exc}") from exc
