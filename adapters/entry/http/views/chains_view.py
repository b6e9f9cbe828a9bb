from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from core.services.exceptions import ChainNotFoundError
from core.use_cases.chain_registry_usecase import ChainRegistryUseCase


router = APIRouter(prefix="/chains", tags=["chains"])


def get_use_case(request: Request) -> ChainRegistryUseCase:
    # table built once in the app lifespan
    return ChainRegistryUseCase(table=request.app.state.chain_table)


@router.get("")
async def list_chains(
    use_case: ChainRegistryUseCase = Depends(get_use_case),
):
    try:
        return use_case.list_chains()
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Failed to list chains: {exc}") from exc


@router.get("/{network_id}")
async def get_chain(
    network_id: int,
    use_case: ChainRegistryUseCase = Depends(get_use_case),
):
    """
    Returns the static registry record for a network: endpoints, contracts,
    vault registries and manual token/vault lists.
    """
    try:
        return use_case.get_chain(network_id=network_id)
    except ChainNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Failed to load chain registry: {exc}") from exc


@router.get("/{network_id}/registries")
async def list_chain_registries(
    network_id: int,
    include_disabled: bool = Query(False, description="Also return registries tagged DISABLED"),
    use_case: ChainRegistryUseCase = Depends(get_use_case),
):
    try:
        return use_case.list_registries(network_id=network_id, include_disabled=include_disabled)
    except ChainNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Failed to list registries: {exc}") from exc
