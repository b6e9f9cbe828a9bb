from __future__ import annotations

from enum import StrEnum


class TokenType(StrEnum):
    """
    Type tag carried by token records (native coin, wrappers, vault shares).
    """

    NATIVE = "Native"
    WRAPPED = "Wrapped"
    STANDARD_VAULT = "Yearn Vault"
    EXPERIMENTAL_VAULT = "Experimental Yearn Vault"
    AUTOMATED_VAULT = "Automated Yearn Vault"
