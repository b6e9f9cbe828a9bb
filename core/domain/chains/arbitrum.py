from __future__ import annotations

from core.domain.chains.common import DEFAULT_COIN_ADDRESS, coin_icon
from core.domain.entities.chain_entity import (
    ChainCurve,
    ChainExtraURI,
    ChainRegistry,
    ContractData,
    ERC20Token,
    ExtraVault,
)
from core.domain.enums.registry_enums import RegistryLabel, RegistryTag
from core.domain.enums.token_enums import TokenType

CHAIN_ID = 42161

ARBITRUM = ChainRegistry(
    id=CHAIN_ID,
    name="arbitrum",
    rpc_uri="https://arbitrum.public-rpc.com",
    subgraph_uri="https://api.thegraph.com/subgraphs/name/yearn/yearn-vaults-v2-arbitrum",
    etherscan_uri="https://api.etherscan.io/v2/api",
    max_block_range=100_000_000,
    max_batch_size=2**63 - 1,
    avg_blocks_per_day=320_000,
    can_use_websocket=False,
    lens_contract=ContractData(address="0x043518AB266485dC085a1DB095B8d9C2Fc78E9b9", block=2_396_321),
    multicall_contract=ContractData(address="0x842eC2c7D803033Edf55E478F461FC547Bc54EB2", block=821_923),
    partner_contract=ContractData(address="0x0e5b46E4b2a05fd53F5a4cD974eb98a9a613bcb7", block=30_385_403),
    apr_oracle_contract=ContractData(address="0x1981AD9F44F2EA9aDd2dC4AD7D075c102C70aF92", block=265_347_717),
    staking_reward_registry=(
        ContractData(
            address="0x26d8EA1d8759d0F9abBcf8181b1fD5D3635daD69",
            block=226_125_838,
            tag=RegistryTag.V3_STAKING,
        ),
    ),
    coin=ERC20Token(
        address=DEFAULT_COIN_ADDRESS,
        type=TokenType.NATIVE,
        name="Arbitrum",
        symbol="ARB",
        display_name="Arbitrum",
        display_symbol="ARB",
        description="Arbitrum is a Layer 2 scaling solution for Ethereum.",
        icon=coin_icon(CHAIN_ID),
        decimals=18,
        chain_id=CHAIN_ID,
    ),
    registries=(
        ContractData(
            address="0x3199437193625DCcD6F9C9e98BDf93582200Eb1f",
            version=2,
            block=4_841_854,
            tag=RegistryTag.DISABLED,
            label=RegistryLabel.YEARN,
        ),
        ContractData(
            address="0xff31A1B020c868F6eA3f61Eb953344920EeCA3af",
            version=4,
            block=171_850_013,
            label=RegistryLabel.YEARN,
        ),
        ContractData(
            address="0x444045c5C13C246e117eD36437303cac8E250aB0",
            version=5,
            block=187_480_878,
            label=RegistryLabel.PUBLIC_ERC4626,
        ),
        ContractData(
            address="0x770D0d1Fb036483Ed4AbB6d53c1C88fb277D812F",
            version=5,
            block=269_623_414,
            tag=RegistryTag.STEALTH,
            label=RegistryLabel.PUBLIC_ERC4626,
        ),
    ),
    yearn_x_registries=(
        ContractData(
            address="0x8020Fb37b21E0eF1707aDa7A914baf44F9045E52",
            block=20_693_634,
            label=RegistryLabel.POOL_TOGETHER,
        ),
    ),
    extra_vaults=(
        # yvMIM, alone in its own registry
        ExtraVault(
            chain_id=CHAIN_ID,
            address="0x074943fEfE3391D033A15557dfa1b6f246Ce5fD0",
            registry_address="0xff31A1B020c868F6eA3f61Eb953344920EeCA3af",
            token_address="0xE11f9786B06438456b044B3E21712228ADcAA0D1",
            api_version="3.0.2",
            block_number=195_564_702,
            type=TokenType.AUTOMATED_VAULT,
        ),
        # PoolTogether
        ExtraVault(
            chain_id=CHAIN_ID,
            address="0x723a85b4554d79ed20e061efc64c5a6e04f196aa",
            registry_address="0xff31a1b020c868f6ea3f61eb953344920eeca3af",
            token_address="0xff970a61a04b1ca14834a43f5de4533ebddb5cc8",
            api_version="3.0.2",
            block_number=223_522_463,
            type=TokenType.AUTOMATED_VAULT,
        ),
        ExtraVault(
            chain_id=CHAIN_ID,
            address="0x801c26fcfd916719631e0cf7d36ca1e049df0373",
            registry_address="0xff31a1b020c868f6ea3f61eb953344920eeca3af",
            token_address="0xfd086bc7cd5c481dcc9c85ebe478a1c0b69fcbb9",
            api_version="3.0.1",
            block_number=183_112_450,
            type=TokenType.AUTOMATED_VAULT,
        ),
        ExtraVault(
            chain_id=CHAIN_ID,
            address="0x482cc95bc6c92d6254529dc2d45095663ae726a2",
            registry_address="0xff31a1b020c868f6ea3f61eb953344920eeca3af",
            token_address="0xff970a61a04b1ca14834a43f5de4533ebddb5cc8",
            api_version="3.0.2",
            block_number=223_522_463,
            type=TokenType.AUTOMATED_VAULT,
        ),
    ),
    blacklisted_vaults=(
        "0x5796698A29F3626c9FE13C4d3d3dEE987c84EBB3",  # test deployment - Nothing
        "0x976a1C749cd8153909e0B04EebE931eF8957b15b",  # test deployment - PHPTest
        "0xFa247d0D55a324ca19985577a2cDcFC383D87953",  # test deployment - PHP
    ),
    extra_tokens=(
        "0x82e3A8F066a6989666b031d916c43672085b1582",  # YFI
        "0x11cDb42B0EB46D95f990BeDD4695A6e3fA034978",  # CRV
        "0xf0f326af3b1Ed943ab95C29470730CC8Cf66ae47",  # wAjna
    ),
    ignored_tokens=(
        "0x5796698A29F3626c9FE13C4d3d3dEE987c84EBB3",
        "0x976a1C749cd8153909e0B04EebE931eF8957b15b",
        "0xFa247d0D55a324ca19985577a2cDcFC383D87953",
    ),
    curve=ChainCurve(
        registry_address="0x0000000022d53366457f9d5e68ec105046fc4383",
        pools_uris=("https://api.curve.finance/api/getPools/all/arbitrum",),
        gauges_uri="https://api.curve.finance/api/getAllGauges?blockchainId=arbitrum",
    ),
    extra_uri=ChainExtraURI(
        gamma_merkl_uri="https://api.angle.money/v2/merkl?chainIds%5B%5D=42161",
        gamma_hypervisor_uri=("https://wire2.gamma.xyz/arbitrum/hypervisors/allData",),
        pendle_core_uri="https://api-v2.pendle.finance/core/v1/42161",
    ),
)
