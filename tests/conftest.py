"""
Shared fixtures for the registry and strategy tests.
"""
from __future__ import annotations

from typing import Any, Callable

import pytest

from core.domain.chains.arbitrum import ARBITRUM
from core.domain.entities.strategy_entity import RawStrategyObservation
from core.services.chain_registry import ChainRegistryTable

STRATEGY_ADDRESS = "0x1f8ad2cec4a2595ff3cda9e8a39c0b1be1a02014"


@pytest.fixture
def arbitrum_table() -> ChainRegistryTable:
    return ChainRegistryTable([ARBITRUM])


@pytest.fixture
def make_raw() -> Callable[..., RawStrategyObservation]:
    def _make(**overrides: Any) -> RawStrategyObservation:
        data: dict[str, Any] = {
            "address": STRATEGY_ADDRESS,
            "name": "StrategyCurveBoost",
            "last_total_debt": 1_000,
            "last_total_loss": 0,
            "last_total_gain": 50,
            "last_performance_fee": 1_000,
            "last_report": 1_700_000_000,
            "last_debt_ratio": 2_500,
            "net_apr": 0.042,
        }
        data.update(overrides)
        return RawStrategyObservation(**data)

    return _make
