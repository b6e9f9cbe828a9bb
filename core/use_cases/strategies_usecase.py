from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from core.domain.entities.strategy_entity import RawStrategyObservation
from core.domain.enums.strategy_enums import StrategyCondition
from core.services.strategy_normalizer import filter_strategies, normalize


@dataclass
class StrategiesUseCase:
    default_condition: StrategyCondition = StrategyCondition.ALL

    @classmethod
    def from_settings(cls) -> "StrategiesUseCase":
        return cls()

    def normalize_many(
        self,
        *,
        strategies: Sequence[RawStrategyObservation],
        condition: str | None = None,
    ) -> dict:
        cond = condition if condition is not None else self.default_condition
        rows = filter_strategies((normalize(s) for s in strategies), cond)
        return {"ok": True, "message": "OK", "data": [r.model_dump(mode="json") for r in rows]}
