"""Fachada de comandos del daemon.

Cada método sigue la misma plantilla:
1) construir `params`,
2) llamar al transporte con el nombre de método fijo (y la wallet si aplica),
3) devolver el resultado tipado, o relanzar el error con el comando como contexto.

El tipo del error no cambia al añadir contexto: un `RpcError` sigue siendo
`RpcError` y un `TransportError` sigue siendo `TransportError`.
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

import httpx

from particlrpc.adapters.http_transport import HttpTransport
from particlrpc.core.config import HttpSettings, RpcConfig
from particlrpc.core.domain.models import (
    AddressDelta,
    Block,
    BlockchainInfo,
    BlockReward,
    ColdStakeUnspent,
    NetworkInfo,
    SetStakingOptions,
    StakingInfo,
    StakingOptions,
    StakingSchema,
    Tx,
    WalletStakingOptions,
)
from particlrpc.core.errors import ParticlRpcError
from particlrpc.core.interfaces.transport import RpcTransport

T = TypeVar("T")


class ParticlRpc:
    """Cliente de alto nivel: un método por comando soportado.

    Uso típico:

        rpc = ParticlRpc()
        rpc.config.load_config_file("particlrpc.json")
        rpc.config.load_credential()
        info = rpc.get_network_info()
    """

    def __init__(
        self,
        config: RpcConfig | None = None,
        *,
        transport: RpcTransport | None = None,
        http_client: httpx.Client | None = None,
        http_settings: HttpSettings | None = None,
        staking_schema: StakingSchema = StakingSchema.SUPERSET,
    ) -> None:
        self.config = config or RpcConfig()
        self.staking_schema = StakingSchema(staking_schema)
        self._transport: RpcTransport = transport or HttpTransport(
            self.config,
            client=http_client,
            settings=http_settings,
        )

    def _call(
        self,
        command: str,
        method: str,
        params: Sequence[Any],
        result_type: type[T],
        wallet: str = "",
    ) -> T:
        try:
            return self._transport.post(method, wallet, params, result_type)
        except ParticlRpcError as exc:
            raise exc.wrap(f"ParticlRpc: {command} failed") from exc

    def call(
        self,
        method: str,
        params: Sequence[Any] = (),
        result_type: Any = Any,
        wallet: str = "",
    ) -> Any:
        """Ejecuta un comando arbitrario. `result_type` es cualquier tipo que Pydantic sepa validar."""

        return self._call(method, method, list(params), result_type, wallet)

    def get_network_info(self) -> NetworkInfo:
        return self._call("getnetworkinfo", "getnetworkinfo", [], NetworkInfo)

    def get_blockchain_info(self) -> BlockchainInfo:
        return self._call("getblockchaininfo", "getblockchaininfo", [], BlockchainInfo)

    def get_staking_info(self, wallet: str = "", schema: StakingSchema | None = None) -> StakingInfo:
        """`getstakinginfo` de una wallet.

        `schema` elige la variante del resultado (por defecto la del cliente);
        ver `StakingSchema`.
        """

        model = StakingSchema(schema or self.staking_schema).model()
        return self._call("getstakinginfo", "getstakinginfo", [], model, wallet)

    def get_uptime(self) -> int:
        """Segundos desde que arrancó el daemon."""

        return self._call("uptime", "uptime", [], int)

    def set_staking_options(
        self,
        enabled: bool,
        rewardaddress: str,
        smsgfeeratetarget: float,
        wallet: str = "",
    ) -> StakingOptions:
        """Guarda las opciones de staking de `wallet` y devuelve las vigentes."""

        options = SetStakingOptions(
            enabled=enabled,
            rewardaddress=rewardaddress,
            smsgfeeratetarget=smsgfeeratetarget,
        )
        res = self._call(
            "set walletsettings",
            "walletsettings",
            ["stakingoptions", options],
            WalletStakingOptions,
            wallet,
        )
        return res.stakingoptions

    def get_staking_options(self, wallet: str = "") -> StakingOptions:
        res = self._call(
            "get walletsettings",
            "walletsettings",
            ["stakingoptions"],
            WalletStakingOptions,
            wallet,
        )
        return res.stakingoptions

    # Cadena / índices

    def get_best_block_hash(self) -> str:
        return self._call("getbestblockhash", "getbestblockhash", [], str)

    def get_block_hash(self, height: int) -> str:
        return self._call("getblockhash", "getblockhash", [height], str)

    def get_block(self, blockhash: str) -> Block:
        return self._call("getblock", "getblock", [blockhash], Block)

    def get_raw_transaction(self, txid: str) -> Tx:
        """Transacción decodificada (`getrawtransaction <txid> true`)."""

        return self._call("getrawtransaction", "getrawtransaction", [txid, True], Tx)

    def get_block_reward(self, height: int) -> BlockReward:
        return self._call("getblockreward", "getblockreward", [height], BlockReward)

    def get_address_deltas(
        self,
        addresses: Sequence[str],
        start: int | None = None,
        end: int | None = None,
    ) -> list[AddressDelta]:
        """Movimientos de saldo de `addresses` (requiere `-addressindex`)."""

        query: dict[str, Any] = {"addresses": list(addresses)}
        if start is not None:
            query["start"] = start
        if end is not None:
            query["end"] = end
        return self._call("getaddressdeltas", "getaddressdeltas", [query], list[AddressDelta])

    def list_cold_stake_unspent(self, stake_address: str, height: int | None = None) -> list[ColdStakeUnspent]:
        params: list[Any] = [stake_address]
        if height is not None:
            params.append(height)
        return self._call(
            "listcoldstakeunspent",
            "listcoldstakeunspent",
            params,
            list[ColdStakeUnspent],
        )
