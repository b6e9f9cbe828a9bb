"""
Optimism registry record.

PROVISIONAL: contract addresses and first-relevant blocks here were written by
hand and are only checked for syntax. Verify them against the live deployments
before using this record to bound historical scans.
"""

from __future__ import annotations

from core.domain.chains.common import DEFAULT_COIN_ADDRESS, MULTICALL3_ADDRESS, coin_icon
from core.domain.entities.chain_entity import (
    ChainCurve,
    ChainExtraURI,
    ChainRegistry,
    ContractData,
    ERC20Token,
)
from core.domain.enums.registry_enums import RegistryLabel
from core.domain.enums.token_enums import TokenType

CHAIN_ID = 10

OPTIMISM = ChainRegistry(
    id=CHAIN_ID,
    name="optimism",
    rpc_uri="https://mainnet.optimism.io",
    subgraph_uri="https://api.thegraph.com/subgraphs/name/yearn/yearn-vaults-v2-optimism",
    etherscan_uri="https://api.etherscan.io/v2/api",
    max_block_range=10_000_000,
    max_batch_size=2**63 - 1,
    avg_blocks_per_day=43_200,
    can_use_websocket=False,
    lens_contract=ContractData(address="0xb082d9f4734c535d9d80536f7e87a6f4f471bf65", block=18_109_291),
    multicall_contract=ContractData(address=MULTICALL3_ADDRESS, block=4_286_263),
    partner_contract=ContractData(address="0x7e08735690028cdf3d81e7165493f1c34065abb1", block=29_675_215),
    apr_oracle_contract=ContractData(address="0x27ad2ffc74f74ed27e1c0a19f1858dd0963277ae", block=114_939_468),
    coin=ERC20Token(
        address=DEFAULT_COIN_ADDRESS,
        type=TokenType.NATIVE,
        name="Ether",
        symbol="ETH",
        display_name="Ether",
        display_symbol="ETH",
        description="Ether is the native currency of the Optimism network.",
        icon=coin_icon(CHAIN_ID),
        decimals=18,
        chain_id=CHAIN_ID,
    ),
    registries=(
        ContractData(
            address="0x79286dd38c9017e5423073bac11f53357fc5c128",
            version=2,
            block=22_451_152,
            label=RegistryLabel.YEARN,
        ),
        ContractData(
            address="0x1ba4eb0f44ab82541e56669e18972b0d6037dfe0",
            version=3,
            block=90_000_000,
            label=RegistryLabel.YEARN,
        ),
    ),
    extra_tokens=(
        "0x4200000000000000000000000000000000000042",  # OP
    ),
    curve=ChainCurve(
        registry_address="0x0000000022d53366457f9d5e68ec105046fc4383",
        pools_uris=("https://api.curve.finance/api/getPools/all/optimism",),
        gauges_uri="https://api.curve.finance/api/getAllGauges?blockchainId=optimism",
    ),
    extra_uri=ChainExtraURI(
        gamma_merkl_uri="https://api.angle.money/v2/merkl?chainIds%5B%5D=10",
        gamma_hypervisor_uri=("https://wire2.gamma.xyz/optimism/hypervisors/allData",),
        pendle_core_uri="https://api-v2.pendle.finance/core/v1/10",
    ),
)
