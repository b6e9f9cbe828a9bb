from __future__ import annotations

from enum import StrEnum


class RegistryTag(StrEnum):
    """
    Special-handling markers on registry entries.

    Tags are advisory: the registry table keeps every entry, consumers decide
    what a tag means for their scan.

    DISABLED: kept for historical queries, excluded from active scanning.
    STEALTH: vaults are indexed but not advertised.
    """

    DISABLED = "DISABLED"
    STEALTH = "STEALTH"
    V3_STAKING = "V3 STAKING"


class RegistryLabel(StrEnum):
    """
    Registry family.
    """

    YEARN = "YEARN"
    PUBLIC_ERC4626 = "PUBLIC_ERC4626"
    POOL_TOGETHER = "POOL_TOGETHER"
