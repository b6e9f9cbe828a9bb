from __future__ import annotations

from web3 import Web3

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def _norm(a: str | None) -> str:
    return (a or "").strip()


def _norm_lower(a: str | None) -> str:
    return _norm(a).lower()


def _checksum(name: str, addr: str | None) -> str:
    """
    Validate a 20-byte hex address and return it EIP-55 checksummed.
    """
    addr = _norm(addr)
    # single-case input is accepted as is; mixed case must be a valid EIP-55 checksum
    if not addr.startswith("0x") or not Web3.is_address(addr):
        raise ValueError(f"{name} must be a 20-byte hex address, got {addr!r}.")
    return Web3.to_checksum_address(addr)


def _checksum_or_raw(addr: str | None) -> str:
    # never raises: malformed addresses are passed through stripped
    addr = _norm(addr)
    if addr.startswith("0x") and Web3.is_address(addr):
        return Web3.to_checksum_address(addr)
    return addr


def _require_non_empty(name: str, value: str | None) -> str:
    value = _norm(value)
    if not value:
        raise ValueError(f"{name} must not be empty.")
    return value
