"""Configuración del cliente.

Por qué aquí:
- `RpcConfig` es el único estado que el cliente conserva entre llamadas
  (directorio de datos, host, puerto y token de autenticación).
- Las reglas de valores por defecto viven en validadores de Pydantic, así que
  se aplican igual desde los setters, desde el fichero de config o asignando
  atributos directamente.
- `HttpSettings` (pydantic-settings) agrupa los ajustes del cliente HTTP
  (timeout, User-Agent) y no toca la conexión al daemon.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from particlrpc.core.errors import ConfigParseError, ConfigReadError, CredentialReadError

DEFAULT_DATA_DIR = "."
DEFAULT_RPC_HOST = "localhost"
DEFAULT_RPC_PORT = 51735
COOKIE_FILENAME = ".cookie"


class ConfigFile(BaseModel):
    """Contenido del fichero JSON de configuración. Todas las claves son opcionales."""

    model_config = ConfigDict(extra="ignore")

    data_dir: str | None = None
    rpc_host: str | None = None
    rpc_port: int | None = None


class RpcConfig(BaseModel):
    """Estado de conexión al daemon.

    Reglas:
    - `data_dir` vacío => ".".
    - `host` vacío => "localhost".
    - `port` <= 0 => 51735.
    - `auth_token` queda vacío hasta `load_credential()` / `set_auth_token()`.

    No es thread-safe: se configura antes de lanzar llamadas concurrentes.
    """

    model_config = ConfigDict(validate_assignment=True)

    data_dir: str = Field(default=DEFAULT_DATA_DIR, description="Directorio de datos de particld.")
    host: str = Field(default=DEFAULT_RPC_HOST, description="Host del servidor RPC.")
    port: int = Field(default=DEFAULT_RPC_PORT, description="Puerto del servidor RPC.")
    auth_token: str = Field(default="", repr=False, description="Token 'user:password'.")

    @field_validator("data_dir", mode="before")
    @classmethod
    def _default_data_dir(cls, value: object) -> object:
        if isinstance(value, Path):
            value = str(value)
        return value or DEFAULT_DATA_DIR

    @field_validator("host", mode="before")
    @classmethod
    def _default_host(cls, value: object) -> object:
        return value or DEFAULT_RPC_HOST

    @field_validator("port")
    @classmethod
    def _default_port(cls, value: int) -> int:
        return value if value > 0 else DEFAULT_RPC_PORT

    def set_data_directory(self, path: str | Path) -> None:
        self.data_dir = path

    def set_host(self, host: str) -> None:
        self.host = host

    def set_port(self, port: int) -> None:
        self.port = port

    def set_auth_token(self, token: str) -> None:
        """Usa un token explícito (`rpcuser:rpcpassword`) en lugar del `.cookie`."""

        self.auth_token = token.strip()

    def load_config_file(self, path: str | Path) -> None:
        """Aplica `data_dir`/`rpc_host`/`rpc_port` desde un fichero JSON.

        Solo se sobrescriben los campos presentes, no nulos, no vacíos y (para el
        puerto) positivos; el resto de la configuración se mantiene.
        """

        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ConfigReadError(f"Failed to read config file {path}: {exc}") from exc

        try:
            cfg = ConfigFile.model_validate_json(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as exc:
            raise ConfigParseError(f"Syntax error in config file {path}: {exc}") from exc

        if cfg.data_dir:
            self.data_dir = cfg.data_dir
        if cfg.rpc_host:
            self.host = cfg.rpc_host
        if cfg.rpc_port is not None and cfg.rpc_port > 0:
            self.port = cfg.rpc_port

    @property
    def cookie_path(self) -> Path:
        return Path(self.data_dir) / COOKIE_FILENAME

    def load_credential(self) -> None:
        """Lee el `.cookie` que particld genera en su directorio de datos."""

        path = self.cookie_path
        try:
            token = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CredentialReadError(f"Failed to read cookie file {path}: {exc}") from exc
        self.auth_token = token.strip()

    def base_url(self, wallet: str = "") -> str:
        url = f"http://{self.host}:{self.port}"
        if wallet:
            url += "/wallet/" + quote(wallet, safe="")
        return url

    def credentials(self) -> tuple[str, str] | None:
        """Separa `auth_token` en (usuario, password) para Basic auth."""

        if not self.auth_token:
            return None
        user, _, password = self.auth_token.partition(":")
        return user, password


class HttpSettings(BaseSettings):
    """Ajustes del cliente HTTP.

    Por qué pydantic-settings:
    - Tipado + validación de variables de entorno `PARTICLRPC_*` sin que el
      código de transporte lea `os.environ`.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARTICLRPC_",
        extra="ignore",
        case_sensitive=False,
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="particlrpc/0.1",
        min_length=1,
        description="User-Agent de las peticiones al daemon.",
    )

