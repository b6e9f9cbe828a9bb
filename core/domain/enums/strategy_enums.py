from __future__ import annotations

from enum import StrEnum


class StrategyStatus(StrEnum):
    """
    Statuses inferred for a strategy when no curated status is set.
    """

    ACTIVE = "active"
    NOT_ACTIVE = "not_active"
    UNALLOCATED = "unallocated"


class StrategyCondition(StrEnum):
    """
    Inclusion conditions accepted by the strategies filter.

    ALL: every strategy.
    ABSOLUTE: strategies with a positive total debt.
    IN_QUEUE: strategies in the vault withdrawal queue.
    DEBT_RATIO: strategies with a positive debt ratio.
    """

    ALL = "all"
    ABSOLUTE = "absolute"
    IN_QUEUE = "inQueue"
    DEBT_RATIO = "debtRatio"

    @classmethod
    def parse(cls, value: object) -> StrategyCondition | None:
        """
        Return the matching condition, or None for anything outside the set.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None
