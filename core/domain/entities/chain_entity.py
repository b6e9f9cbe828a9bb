from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from core.domain.enums.registry_enums import RegistryTag
from core.domain.enums.token_enums import TokenType
from core.services.normalize import ZERO_ADDRESS, _checksum, _norm_lower, _require_non_empty


def _checksum_many(name: str, values: Any) -> Tuple[str, ...]:
    return tuple(_checksum(name, v) for v in (values or ()))


class ContractData(BaseModel):
    """
    A contract (or registry) and the first block at which it is authoritative.

    Scans for this contract must never start earlier than `block`.
    `version`, `tag` and `label` are only meaningful on registry entries.
    """

    address: str
    block: int = Field(..., ge=0)
    version: int = Field(default=0, ge=0)
    tag: str = ""
    label: str = ""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @field_validator("address")
    @classmethod
    def _addr(cls, v: str, info: ValidationInfo) -> str:
        return _checksum(info.field_name, v)

    @property
    def is_disabled(self) -> bool:
        return self.tag == RegistryTag.DISABLED


class ERC20Token(BaseModel):
    address: str
    underlying_tokens_addresses: Tuple[str, ...] = ()
    type: TokenType
    name: str
    symbol: str
    display_name: str = ""
    display_symbol: str = ""
    description: str = ""
    icon: str = ""
    decimals: int = Field(..., ge=0)
    chain_id: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @field_validator("address")
    @classmethod
    def _addr(cls, v: str, info: ValidationInfo) -> str:
        return _checksum(info.field_name, v)

    @field_validator("underlying_tokens_addresses", mode="before")
    @classmethod
    def _underlying(cls, v: Any) -> Tuple[str, ...]:
        return _checksum_many("underlying_tokens_addresses", v)


class ExtraVault(BaseModel):
    """
    A vault that registry scanning cannot discover and is listed by hand.
    """

    chain_id: int = Field(..., gt=0)
    address: str
    registry_address: str
    token_address: str
    api_version: str
    block_number: int = Field(..., ge=0)
    type: TokenType

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @field_validator("address", "registry_address", "token_address")
    @classmethod
    def _addr(cls, v: str, info: ValidationInfo) -> str:
        return _checksum(info.field_name, v)

    @field_validator("api_version")
    @classmethod
    def _api_version(cls, v: str) -> str:
        return _require_non_empty("api_version", v)


class ChainCurve(BaseModel):
    registry_address: str
    factory_address: str = ZERO_ADDRESS
    pools_uris: Tuple[str, ...] = ()
    gauges_uri: str

    model_config = ConfigDict(frozen=True)

    @field_validator("registry_address", "factory_address")
    @classmethod
    def _addr(cls, v: str, info: ValidationInfo) -> str:
        return _checksum(info.field_name, v)

    @field_validator("pools_uris", mode="before")
    @classmethod
    def _pools(cls, v: Any) -> Tuple[str, ...]:
        return tuple(_require_non_empty("pools_uris", u) for u in (v or ()))

    @field_validator("gauges_uri")
    @classmethod
    def _gauges(cls, v: str) -> str:
        return _require_non_empty("gauges_uri", v)


class ChainExtraURI(BaseModel):
    """
    Protocol specific endpoints. Absent endpoints are None, never "".
    """

    gamma_merkl_uri: Optional[str] = None
    gamma_hypervisor_uri: Tuple[str, ...] = ()
    pendle_core_uri: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("gamma_merkl_uri", "pendle_core_uri")
    @classmethod
    def _uri(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        if v is None:
            return None
        return _require_non_empty(info.field_name, v)

    @field_validator("gamma_hypervisor_uri", mode="before")
    @classmethod
    def _hypervisors(cls, v: Any) -> Tuple[str, ...]:
        return tuple(_require_non_empty("gamma_hypervisor_uri", u) for u in (v or ()))


class ChainRegistry(BaseModel):
    """
    Static, per-network deployment configuration.

    One record per supported network, written by hand and loaded once at
    startup. Records are frozen; a block-scoped entry never changes meaning
    at runtime.
    """

    id: int = Field(..., gt=0)
    name: str

    rpc_uri: str
    subgraph_uri: str
    etherscan_uri: str

    max_block_range: int = Field(..., gt=0)
    max_batch_size: int = Field(..., gt=0)
    avg_blocks_per_day: int = Field(..., gt=0)
    can_use_websocket: bool = False

    lens_contract: ContractData
    multicall_contract: ContractData
    partner_contract: ContractData
    apr_oracle_contract: ContractData

    staking_reward_registry: Tuple[ContractData, ...] = ()
    registries: Tuple[ContractData, ...] = ()
    yearn_x_registries: Tuple[ContractData, ...] = ()

    coin: ERC20Token

    extra_vaults: Tuple[ExtraVault, ...] = ()
    blacklisted_vaults: Tuple[str, ...] = ()
    extra_tokens: Tuple[str, ...] = ()
    ignored_tokens: Tuple[str, ...] = ()

    curve: Optional[ChainCurve] = None
    extra_uri: ChainExtraURI = Field(default_factory=ChainExtraURI)

    model_config = ConfigDict(frozen=True)

    @field_validator("name", "rpc_uri", "subgraph_uri", "etherscan_uri")
    @classmethod
    def _non_empty(cls, v: str, info: ValidationInfo) -> str:
        return _require_non_empty(info.field_name, v)

    @field_validator("blacklisted_vaults", "extra_tokens", "ignored_tokens", mode="before")
    @classmethod
    def _addresses(cls, v: Any, info: ValidationInfo) -> Tuple[str, ...]:
        return _checksum_many(info.field_name, v)

    @model_validator(mode="after")
    def _same_chain(self) -> "ChainRegistry":
        if self.coin.chain_id != self.id:
            raise ValueError(f"coin.chain_id {self.coin.chain_id} does not match chain id {self.id}.")
        for vault in self.extra_vaults:
            if vault.chain_id != self.id:
                raise ValueError(
                    f"extra vault {vault.address} has chain_id {vault.chain_id}, expected {self.id}."
                )
        return self

    def active_registries(self) -> Tuple[ContractData, ...]:
        """
        Registries a scanner should follow: every entry not tagged DISABLED.

        Advisory only. `registries` itself always keeps disabled entries.
        """
        return tuple(r for r in self.registries if not r.is_disabled)

    def is_blacklisted_vault(self, address: str) -> bool:
        addr = _norm_lower(address)
        return any(v.lower() == addr for v in self.blacklisted_vaults)

    def is_ignored_token(self, address: str) -> bool:
        addr = _norm_lower(address)
        return any(t.lower() == addr for t in self.ignored_tokens)
