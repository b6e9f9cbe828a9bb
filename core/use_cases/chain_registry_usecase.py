from __future__ import annotations

from dataclasses import dataclass

from adapters.entry.http.dtos.chain_registry_dtos import ChainSummaryOut, RegistryEntryOut
from core.services.chain_registry import ChainRegistryTable


@dataclass
class ChainRegistryUseCase:
    table: ChainRegistryTable

    def list_chains(self) -> dict:
        data = [ChainSummaryOut(id=c.id, name=c.name).model_dump() for c in self.table.all()]
        return {"ok": True, "message": "OK", "data": data}

    def get_chain(self, *, network_id: int) -> dict:
        chain = self.table.require(network_id)
        return {"ok": True, "message": "OK", "data": chain.model_dump(mode="json")}

    def list_registries(self, *, network_id: int, include_disabled: bool = False) -> dict:
        """
        Vault registries for a network.

        DISABLED entries are dropped unless `include_disabled` is set; the
        table itself is never filtered.
        """
        chain = self.table.require(network_id)
        rows = chain.registries if include_disabled else chain.active_registries()
        data = [
            RegistryEntryOut(
                address=r.address,
                block=r.block,
                version=r.version,
                tag=r.tag,
                label=r.label,
            ).model_dump()
            for r in rows
        ]
        return {"ok": True, "message": "OK", "data": data}
