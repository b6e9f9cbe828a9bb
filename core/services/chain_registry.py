# core/services/chain_registry.py
from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from config import Settings, get_settings
from core.domain.chains.arbitrum import ARBITRUM
from core.domain.chains.ethereum import ETHEREUM
from core.domain.chains.optimism import OPTIMISM
from core.domain.entities.chain_entity import ChainRegistry
from core.services.exceptions import ChainNotFoundError

logger = logging.getLogger(__name__)

BUILTIN_CHAINS: Mapping[int, ChainRegistry] = MappingProxyType(
    {chain.id: chain for chain in (ETHEREUM, OPTIMISM, ARBITRUM)}
)


class ChainRegistryTable:
    """
    Read-only lookup of chain registries by network id.

    Built once at startup and shared by reference. Records are frozen and the
    backing mapping is a MappingProxyType.
    """

    def __init__(self, chains: Iterable[ChainRegistry]):
        by_id: Dict[int, ChainRegistry] = {}
        for chain in chains:
            if chain.id in by_id:
                raise ValueError(f"Duplicate chain id in registry table: {chain.id}")
            by_id[chain.id] = chain
        self._chains: Mapping[int, ChainRegistry] = MappingProxyType(by_id)

    def __contains__(self, network_id: object) -> bool:
        return network_id in self._chains

    def __len__(self) -> int:
        return len(self._chains)

    def get(self, network_id: int) -> Optional[ChainRegistry]:
        """
        Return the registry for `network_id`, or None when it is not configured.
        """
        return self._chains.get(network_id)

    def require(self, network_id: int) -> ChainRegistry:
        chain = self._chains.get(network_id)
        if chain is None:
            raise ChainNotFoundError(network_id)
        return chain

    def ids(self) -> Tuple[int, ...]:
        return tuple(sorted(self._chains))

    def all(self) -> Tuple[ChainRegistry, ...]:
        return tuple(self._chains[i] for i in self.ids())


def _with_rpc_override(chain: ChainRegistry, rpc_uri: str) -> ChainRegistry:
    # revalidate instead of model_copy(update=...) so the override is checked too
    data = chain.model_dump()
    data["rpc_uri"] = rpc_uri
    return ChainRegistry.model_validate(data)


def build_chain_table(
    settings: Settings,
    *,
    builtin: Mapping[int, ChainRegistry] = BUILTIN_CHAINS,
) -> ChainRegistryTable:
    """
    Build the registry table for the networks enabled in `settings`.

    Network ids without a built-in record are skipped with a warning.
    RPC endpoints may be overridden per network via RPC_URI_FOR_<id>.
    """
    chains = []
    for network_id in settings.SUPPORTED_NETWORKS:
        chain = builtin.get(network_id)
        if chain is None:
            logger.warning("No built-in registry for network %s, skipping.", network_id)
            continue

        override = settings.RPC_URI_OVERRIDES.get(network_id)
        if override:
            logger.info("Using RPC override for network %s.", network_id)
            chain = _with_rpc_override(chain, override)
        chains.append(chain)

    table = ChainRegistryTable(chains)
    logger.info("Chain registry table loaded: %s", ", ".join(str(i) for i in table.ids()) or "none")
    return table


@lru_cache()
def get_chain_table() -> ChainRegistryTable:
    return build_chain_table(get_settings())
