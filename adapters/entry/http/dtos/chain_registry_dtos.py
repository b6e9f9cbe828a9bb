from __future__ import annotations

from pydantic import BaseModel, Field


class ChainSummaryOut(BaseModel):
    id: int = Field(..., description="Network id (e.g. 1, 10, 42161)")
    name: str


class RegistryEntryOut(BaseModel):
    address: str
    block: int = Field(..., description="First block at which the registry is authoritative")
    version: int = 0
    tag: str = ""
    label: str = ""
