from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from core.domain.enums.strategy_enums import StrategyCondition
from core.services.normalize import _checksum_or_raw

UINT64_MASK = (1 << 64) - 1


def _to_int(v: Any) -> int:
    """
    Best-effort integer coercion for decoded contract values.

    Accepts ints, numeric strings (integer, decimal, exponent or 0x-hex),
    floats and Decimals. Fractions are truncated.
    Anything else, None included, becomes 0.
    """
    if v is None:
        return 0
    if isinstance(v, bool):
        return int(v)
    if isinstance(v, int):
        return v
    if isinstance(v, str):
        s = v.strip()
        if s.lower().startswith(("0x", "-0x")):
            try:
                return int(s, 16)
            except ValueError:
                return 0
        # "1000", "1000.0" and "1.5e21" all denote the same kind of amount
        try:
            d = Decimal(s)
        except InvalidOperation:
            return 0
        # nothing on chain exceeds uint256
        if not d.is_finite() or d.adjusted() > 77:
            return 0
        return int(d)
    try:
        return int(v)
    except (TypeError, ValueError, OverflowError):
        return 0


def _to_float(v: Any) -> float:
    try:
        f = float(v) if v is not None else 0.0
    except (TypeError, ValueError):
        return 0.0
    return f if math.isfinite(f) else 0.0


def _to_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes")
    return bool(v)


def _to_uint64(v: int) -> int:
    return int(v) & UINT64_MASK


class RawStrategyObservation(BaseModel):
    """
    Strategy state as decoded by the fetcher: identity, lifecycle flags and
    the latest report. Every field is optional and malformed values degrade
    to empty/zero instead of failing validation.
    """

    address: str = ""
    name: str = ""
    display_name: str = Field(default="", alias="displayName")
    description: str = ""
    status: str = ""

    is_retired: bool = Field(default=False, alias="isRetired")
    is_in_queue: bool = Field(default=False, alias="isInQueue")

    last_total_debt: int = Field(default=0, alias="lastTotalDebt")
    last_total_loss: int = Field(default=0, alias="lastTotalLoss")
    last_total_gain: int = Field(default=0, alias="lastTotalGain")
    last_performance_fee: int = Field(default=0, alias="lastPerformanceFee")
    last_report: int = Field(default=0, alias="lastReport")
    last_debt_ratio: int = Field(default=0, alias="lastDebtRatio")  # vaults >= 0.2.2 only
    net_apr: float = Field(default=0.0, alias="netAPR")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("address", mode="before")
    @classmethod
    def _address(cls, v: Any) -> str:
        return _checksum_or_raw(v if isinstance(v, str) else "")

    @field_validator("name", "display_name", "description", "status", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("is_retired", "is_in_queue", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return _to_bool(v)

    @field_validator(
        "last_total_debt",
        "last_total_loss",
        "last_total_gain",
        "last_performance_fee",
        "last_report",
        "last_debt_ratio",
        mode="before",
    )
    @classmethod
    def _amount(cls, v: Any) -> int:
        return _to_int(v)

    @field_validator("net_apr", mode="before")
    @classmethod
    def _apr(cls, v: Any) -> float:
        return _to_float(v)


class ExternalStrategyDetails(BaseModel):
    """
    Financial snapshot of a strategy as served by the API.

    Debt, loss and gain keep full precision and serialize as decimal strings.
    `in_queue` is used for filtering only and never serialized.
    """

    total_debt: int = 0
    total_loss: int = 0
    total_gain: int = 0
    performance_fee: int = 0
    last_report: int = 0
    debt_ratio: int = 0
    in_queue: bool = Field(default=False, exclude=True)

    model_config = ConfigDict(frozen=True)

    @model_serializer(mode="plain")
    def _serialize(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "totalDebt": str(self.total_debt),
            "totalLoss": str(self.total_loss),
            "totalGain": str(self.total_gain),
            "performanceFee": self.performance_fee,
            "lastReport": self.last_report,
        }
        if self.debt_ratio:
            out["debtRatio"] = self.debt_ratio
        return out


class ExternalStrategy(BaseModel):
    address: str
    name: str
    description: str = ""
    status: str
    net_apr: float = 0.0
    details: Optional[ExternalStrategyDetails] = None

    model_config = ConfigDict(frozen=True)

    @model_serializer(mode="plain")
    def _serialize(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"address": self.address, "name": self.name}
        if self.description:
            out["description"] = self.description
        out["status"] = self.status
        if self.net_apr:
            out["netAPR"] = self.net_apr
        if self.details is not None:
            out["details"] = self.details.model_dump()
        return out

    def should_be_included(self, condition: str | StrategyCondition | None) -> bool:
        """
        Inclusion predicate used to filter API responses.

        Unknown conditions exclude the strategy instead of raising, since the
        keyword usually comes straight from a query parameter.
        """
        cond = StrategyCondition.parse(condition)
        if cond is StrategyCondition.ALL:
            return True
        if cond is None or self.details is None:
            return False
        if cond is StrategyCondition.ABSOLUTE:
            return self.details.total_debt > 0
        if cond is StrategyCondition.IN_QUEUE:
            return self.details.in_queue
        if cond is StrategyCondition.DEBT_RATIO:
            return self.details.debt_ratio > 0
        return False
