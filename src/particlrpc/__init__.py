"""Cliente JSON-RPC para particld.

Permite:
- configurar host/puerto/directorio de datos y leer el `.cookie` del daemon,
- ejecutar los comandos soportados y recibir modelos tipados (Pydantic v2),
- distinguir errores de red (`NetworkError`) de errores del daemon (`RpcError`).
"""

from particlrpc.adapters.http_client import build_client
from particlrpc.adapters.http_transport import HttpTransport
from particlrpc.core.codec import decode_response, encode_request
from particlrpc.core.config import HttpSettings, RpcConfig
from particlrpc.core.domain.models import (
    AddressDelta,
    Block,
    BlockchainInfo,
    BlockReward,
    ColdStakeUnspent,
    FoundationStakingInfo,
    NetworkInfo,
    StakingInfo,
    StakingOptions,
    StakingSchema,
    TreasuryStakingInfo,
    Tx,
)
from particlrpc.core.errors import (
    ConfigParseError,
    ConfigReadError,
    CredentialReadError,
    DecodeError,
    EncodeError,
    HttpStatusError,
    NetworkError,
    ParticlRpcError,
    RpcError,
    TransportError,
)
from particlrpc.core.services import ParticlRpc

__all__ = [
    "AddressDelta",
    "Block",
    "BlockReward",
    "BlockchainInfo",
    "ColdStakeUnspent",
    "ConfigParseError",
    "ConfigReadError",
    "CredentialReadError",
    "DecodeError",
    "EncodeError",
    "FoundationStakingInfo",
    "HttpSettings",
    "HttpStatusError",
    "HttpTransport",
    "NetworkError",
    "NetworkInfo",
    "ParticlRpc",
    "ParticlRpcError",
    "RpcConfig",
    "RpcError",
    "StakingInfo",
    "StakingOptions",
    "StakingSchema",
    "TransportError",
    "TreasuryStakingInfo",
    "Tx",
    "build_client",
    "decode_response",
    "encode_request",
]
