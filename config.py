import os
import re
from dotenv import load_dotenv
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Mapping

load_dotenv()

_RPC_OVERRIDE_RE = re.compile(r"^RPC_URI_FOR_(\d+)$")


def _parse_csv(value: str) -> List[str]:
    if not value:
        return []
    items = [x.strip() for x in value.split(",")]
    items = [x for x in items if x]
    return items


def _parse_networks(value: str) -> List[int]:
    out: List[int] = []
    for item in _parse_csv(value):
        if not item.isdigit():
            raise ValueError(f"SUPPORTED_NETWORKS entry is not a network id: {item!r}")
        if int(item) not in out:
            out.append(int(item))
    return out


def _rpc_overrides(environ: Mapping[str, str]) -> Dict[int, str]:
    # RPC_URI_FOR_42161=https://... replaces the built-in endpoint for that network
    out: Dict[int, str] = {}
    for key, value in environ.items():
        m = _RPC_OVERRIDE_RE.match(key)
        if m and value.strip():
            out[int(m.group(1))] = value.strip()
    return out


@dataclass
class Settings:
    # chains loaded into the registry table at startup
    SUPPORTED_NETWORKS: List[int] = field(default_factory=list)
    RPC_URI_OVERRIDES: Dict[int, str] = field(default_factory=dict)

    # generic
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    networks_default = [1, 10, 42161]

    networks_raw = os.getenv("SUPPORTED_NETWORKS", "")
    networks = _parse_networks(networks_raw) or list(networks_default)

    return Settings(
        SUPPORTED_NETWORKS=networks,
        RPC_URI_OVERRIDES=_rpc_overrides(os.environ),
        ENV=os.getenv("ENV", "dev"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
