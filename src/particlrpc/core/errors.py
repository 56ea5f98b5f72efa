"""Errores del cliente RPC.

Por qué una jerarquía propia:
- Los fallos de red (`NetworkError`) y los errores que reporta el daemon
  (`RpcError`) son tipos disjuntos: el caller puede reintentar los primeros y
  mostrar los segundos tal cual.
- Cada error acumula contexto (qué operación/comando falló) sin perder su tipo.
"""

from __future__ import annotations


class ParticlRpcError(Exception):
    """Base de todos los errores de `particlrpc`."""

    def __init__(self, message: str, *, context: tuple[str, ...] = ()) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def wrap(self, context: str) -> "ParticlRpcError":
        """Devuelve una copia del mismo tipo con `context` antepuesto."""

        wrapped = type(self).__new__(type(self))
        wrapped.__dict__.update(self.__dict__)
        wrapped.args = self.args
        wrapped.context = (context, *self.context)
        return wrapped

    def __str__(self) -> str:
        return ": ".join((*self.context, self.message))


class ConfigError(ParticlRpcError):
    pass


class ConfigReadError(ConfigError):
    """The config file could not be read."""


class ConfigParseError(ConfigError):
    """The config file is not valid JSON or has fields of the wrong type."""


class CredentialReadError(ConfigError):
    """The `.cookie` file is missing or unreadable."""


class EncodeError(ParticlRpcError):
    pass


class DecodeError(ParticlRpcError):
    pass


class NetworkError(ParticlRpcError):
    """Fallo de red o de protocolo HTTP (candidato a reintento)."""


class TransportError(NetworkError):
    """The POST failed before any response was received."""


class HttpStatusError(NetworkError):
    """The daemon answered with a status other than 200."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        *,
        rpc_message: str | None = None,
        context: tuple[str, ...] = (),
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.rpc_message = rpc_message
        super().__init__(f"Bad response status: {status_code} {reason}".rstrip(), context=context)


class RpcError(ParticlRpcError):
    """Error de aplicación reportado por el daemon en el campo `error`."""

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        context: tuple[str, ...] = (),
    ) -> None:
        self.code = code
        super().__init__(message, context=context)
