from __future__ import annotations

from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from core.domain.entities.strategy_entity import RawStrategyObservation
from core.use_cases.strategies_usecase import StrategiesUseCase


router = APIRouter(prefix="/strategies", tags=["strategies"])


def get_use_case() -> StrategiesUseCase:
    return StrategiesUseCase.from_settings()


@router.post("/normalize")
async def normalize_strategies(
    strategies: List[RawStrategyObservation] = Body(...),
    condition: str = Query("all", description='One of "all", "absolute", "inQueue", "debtRatio"'),
    use_case: StrategiesUseCase = Depends(get_use_case),
):
    """
    Normalizes raw strategy observations and keeps those matching `condition`.

    Unknown conditions return an empty list.
    """
    try:
        return use_case.normalize_many(strategies=strategies, condition=condition)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Failed to normalize strategies: {exc}") from exc
