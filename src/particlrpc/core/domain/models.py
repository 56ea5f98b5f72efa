"""Modelos de respuesta del daemon (Pydantic v2).

Por qué Pydantic aquí:
- Cada comando RPC tiene una forma JSON conocida; el modelo la documenta y la
  valida en el borde.
- Los nombres de campo replican los del daemon tal cual, así que no hacen falta
  alias.

Nota:
- Los campos que el daemon añada en versiones futuras se ignoran
  (`extra="ignore"`), salvo en `StakingInfo`, que conserva los extra porque su
  forma ya ha cambiado entre versiones.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

Sat = int
"""Cantidad en satoshis (1 PART = 100_000_000 sat)."""


class DaemonModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class NetworkInfo(DaemonModel):
    version: int = Field(default=0, description="Versión numérica del daemon.")
    subversion: str = Field(default="", description="User agent, p.ej. '/Satoshi:0.21.2.7/'.")
    connections: int = Field(default=0, ge=0, description="Número de peers conectados.")


class BlockchainInfo(DaemonModel):
    blocks: int = Field(default=0, ge=0, description="Altura de la cadena validada.")


class StakingSchema(str, Enum):
    """Variantes conocidas del resultado de `getstakinginfo`.

    Daemons antiguos devuelven `cause`/`foundationdonationpercent`; los
    actuales `errors`/`treasurydonationpercent`.
    """

    SUPERSET = "superset"
    TREASURY = "treasury"
    FOUNDATION = "foundation"

    def model(self) -> type["StakingInfo"]:
        if self is StakingSchema.TREASURY:
            return TreasuryStakingInfo
        if self is StakingSchema.FOUNDATION:
            return FoundationStakingInfo
        return StakingInfo


class StakingInfo(BaseModel):
    """Superset de ambas variantes: los campos dependientes de versión son opcionales."""

    model_config = ConfigDict(extra="allow")

    staking: bool = False
    weight: int = 0
    percentyearreward: float = 0.0
    moneysupply: float = 0.0
    netstakeweight: int = 0
    expectedtime: int = 0

    errors: str | None = None
    cause: str | None = None
    treasurydonationpercent: float | None = None
    foundationdonationpercent: float | None = None


class TreasuryStakingInfo(StakingInfo):
    """Superset con `errors`/`treasurydonationpercent` siempre presentes (por defecto "" / 0.0).

    Los campos de la otra variante siguen siendo opcionales.
    """

    errors: str = ""
    treasurydonationpercent: float = 0.0


class FoundationStakingInfo(StakingInfo):
    """Superset con `cause`/`foundationdonationpercent` siempre presentes (por defecto "" / 0.0)."""

    cause: str = ""
    foundationdonationpercent: float = 0.0


class BlockRewardKernelScript(DaemonModel):
    spendaddr: str = ""


class BlockRewardOutputScript(DaemonModel):
    hex: str = ""
    spendaddr: str = ""


class BlockRewardOutput(DaemonModel):
    script: BlockRewardOutputScript = Field(default_factory=BlockRewardOutputScript)
    value: float = 0.0


class BlockReward(DaemonModel):
    blockhash: str = ""
    coinstake: str = ""
    stakereward: float = 0.0
    blockreward: float = 0.0
    kernelscript: BlockRewardKernelScript = Field(default_factory=BlockRewardKernelScript)
    outputs: list[BlockRewardOutput] = Field(default_factory=list)


class ColdStakeUnspent(DaemonModel):
    height: int = 0
    value: Sat = 0
    addrspend: str = ""


class Block(DaemonModel):
    hash: str = ""
    time: int = 0
    height: int = 0


class AddressDelta(DaemonModel):
    satoshis: Sat = 0
    txid: str = ""


class TxVin(DaemonModel):
    # Las entradas coinbase/coinstake no traen txid/vout.
    txid: str = ""
    vout: int = 0


class ScriptPubKey(DaemonModel):
    type: str = ""
    addresses: list[str] = Field(default_factory=list)


class TxVout(DaemonModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str = ""
    value_sat: Sat = Field(default=0, alias="valueSat")
    script_pub_key: ScriptPubKey = Field(default_factory=ScriptPubKey, alias="scriptPubKey")


class Tx(DaemonModel):
    vin: list[TxVin] = Field(default_factory=list)
    vout: list[TxVout] = Field(default_factory=list)
    time: int = 0
    blockhash: str = ""


class StakingOptions(DaemonModel):
    """Opciones de staking vigentes, tal como las devuelve `walletsettings`."""

    rewardaddress: str = ""
    enabled: bool = False
    time: int = 0
    smsgfeeratetarget: float = 0.0


class SetStakingOptions(BaseModel):
    """Payload de `walletsettings stakingoptions {...}`.

    El orden de campos es el orden en el que se serializan.
    """

    enabled: bool
    rewardaddress: str
    smsgfeeratetarget: float


class WalletStakingOptions(DaemonModel):
    """Envoltorio `{"stakingoptions": {...}}` que devuelve `walletsettings`."""

    stakingoptions: StakingOptions = Field(default_factory=StakingOptions)

    @field_validator("stakingoptions", mode="before")
    @classmethod
    def _default_marker(cls, value: Any) -> Any:
        # Una wallet sin opciones guardadas responde "default" en lugar de un objeto.
        if value == "default":
            return {}
        return value
