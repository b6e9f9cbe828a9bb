"""
Ethereum registry record.

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

CHAIN_ID = 1

ETHEREUM = ChainRegistry(
    id=CHAIN_ID,
    name="ethereum",
    rpc_uri="https://eth.public-rpc.com",
    subgraph_uri="https://api.thegraph.com/subgraphs/name/rareweasel/yearn-vaults-v2-subgraph-mainnet",
    etherscan_uri="https://api.etherscan.io/v2/api",
    max_block_range=100_000,
    max_batch_size=2**63 - 1,
    avg_blocks_per_day=7_200,
    can_use_websocket=True,
    lens_contract=ContractData(address="0x83d95e0d5f402511db06817aff3f9ea88224b030", block=12_242_339),
    multicall_contract=ContractData(address=MULTICALL3_ADDRESS, block=14_353_601),
    partner_contract=ContractData(address="0x8ee392a4787397126c163cb9844d7c447da419d8", block=14_166_636),
    apr_oracle_contract=ContractData(address="0x27ad2ffc74f74ed27e1c0a19f1858dd0963277ae", block=19_070_394),
    coin=ERC20Token(
        address=DEFAULT_COIN_ADDRESS,
        type=TokenType.NATIVE,
        name="Ether",
        symbol="ETH",
        display_name="Ether",
        display_symbol="ETH",
        description="Ether is the native currency of the Ethereum network.",
        icon=coin_icon(CHAIN_ID),
        decimals=18,
        chain_id=CHAIN_ID,
    ),
    registries=(
        ContractData(
            address="0xe15461b18ee31b7379019dc523231c57d1cbc18c",
            version=1,
            block=11_563_389,
            label=RegistryLabel.YEARN,
        ),
        ContractData(
            address="0x50c1a2ea0a861a967d9d0ffe2ae4012c2e053804",
            version=2,
            block=12_045_555,
            label=RegistryLabel.YEARN,
        ),
        ContractData(
            address="0xaf1f5e1c19cb68b30aad73846effdf78a5863319",
            version=3,
            block=16_215_519,
            label=RegistryLabel.YEARN,
        ),
    ),
    extra_tokens=(
        "0x0bc529c00c6401aef6d220be8c6ea1667f6ad93e",  # YFI
        "0xd533a949740bb3306d119cc777fa900ba034cd52",  # CRV
    ),
    curve=ChainCurve(
        registry_address="0x0000000022d53366457f9d5e68ec105046fc4383",
        pools_uris=("https://api.curve.finance/api/getPools/all/ethereum",),
        gauges_uri="https://api.curve.finance/api/getAllGauges?blockchainId=ethereum",
    ),
    extra_uri=ChainExtraURI(
        gamma_merkl_uri="https://api.angle.money/v2/merkl?chainIds%5B%5D=1",
        pendle_core_uri="https://api-v2.pendle.finance/core/v1/1",
    ),
)
