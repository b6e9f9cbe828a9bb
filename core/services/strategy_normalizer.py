"""
Strategy normalization for API responses.

Turns the raw observation produced by the fetcher into the external
strategy record and exposes the inclusion predicate used by list endpoints.
Everything here is pure: no I/O, no shared state.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from core.domain.entities.strategy_entity import (
    ExternalStrategy,
    ExternalStrategyDetails,
    RawStrategyObservation,
    _to_uint64,
)
from core.domain.enums.strategy_enums import StrategyCondition, StrategyStatus

logger = logging.getLogger(__name__)


def resolve_name(raw: RawStrategyObservation) -> str:
    return raw.display_name or raw.name


def resolve_status(raw: RawStrategyObservation) -> str:
    """
    Status precedence, first match wins:
      1. curated status, verbatim
      2. retired -> not_active
      3. zero total debt -> unallocated
      4. active
    """
    if raw.status:
        return raw.status
    if raw.is_retired:
        return StrategyStatus.NOT_ACTIVE.value
    if raw.last_total_debt == 0:
        return StrategyStatus.UNALLOCATED.value
    return StrategyStatus.ACTIVE.value


def normalize(raw: RawStrategyObservation) -> ExternalStrategy:
    """
    Build the API representation of a strategy from its raw observation.

    Pure and total: never raises for a validated observation.
    """
    return ExternalStrategy(
        address=raw.address,
        name=resolve_name(raw),
        description=raw.description,
        status=resolve_status(raw),
        net_apr=raw.net_apr,
        details=ExternalStrategyDetails(
            total_debt=raw.last_total_debt,
            total_loss=raw.last_total_loss,
            total_gain=raw.last_total_gain,
            performance_fee=_to_uint64(raw.last_performance_fee),
            last_report=_to_uint64(raw.last_report),
            debt_ratio=_to_uint64(raw.last_debt_ratio),
            in_queue=raw.is_in_queue,
        ),
    )


def should_be_included(strategy: ExternalStrategy, condition: str | StrategyCondition | None) -> bool:
    return strategy.should_be_included(condition)


def filter_strategies(
    strategies: Iterable[ExternalStrategy],
    condition: str | StrategyCondition | None,
) -> List[ExternalStrategy]:
    """
    Keep the strategies matching `condition`. Unknown conditions keep nothing.
    """
    if StrategyCondition.parse(condition) is None:
        logger.debug("Unknown strategies condition %r, excluding all.", condition)
        return []
    return [s for s in strategies if s.should_be_included(condition)]
