from __future__ import annotations

# Placeholder address used for the gas coin of every network.
DEFAULT_COIN_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

BASE_ASSET_URL = "https://assets.smold.app/api/token/"

# multicall3, deployed at the same address on every EVM network
MULTICALL3_ADDRESS = "0xcA11bde05977b3631167028862bE2a173976CA11"


def coin_icon(chain_id: int) -> str:
    return f"{BASE_ASSET_URL}{chain_id}/{DEFAULT_COIN_ADDRESS}/logo-128.png"
