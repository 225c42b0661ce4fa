"""Shared token and pool constants for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import WETH, USDC
    # or
    from tests.helpers.constants import WETH, USDC
"""

# =============================================================================
# Mainnet tokens
# =============================================================================

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)
USDT = "0xdac17f958d2ee523a2206206994597c13d831ec7"  # Tether USD (6 decimals)
WBTC = "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599"  # Wrapped Bitcoin (8 decimals)
BAL = "0xba100000625a3754423978a60c9317c58a424e3d"  # Balancer (18 decimals)
SUSD = "0x57ab1ec28d129707052df4df418d58a2d46d5f51"  # Synth sUSD (18 decimals, unpriced)
WSTETH = "0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0"  # Wrapped stETH (18 decimals)

# Aave boosted pool tokens (linear pool BPTs, 18 decimals)
BB_A_USDT = "0x2bbf681cc4eb09218bee85ea2a5d3d13fa40fc0c"
BB_A_DAI = "0x804cdb9116a10bb78768d3252355a1b18067bf8f"
BB_A_USDC = "0x9210f1204b5a24742eba12f710636d76240df3d0"

# Token decimals lookup
TOKEN_DECIMALS = {
    WETH: 18,
    USDC: 6,
    DAI: 18,
    USDT: 6,
    WBTC: 8,
    BAL: 18,
    SUSD: 18,
    WSTETH: 18,
    BB_A_USDT: 18,
    BB_A_DAI: 18,
    BB_A_USDC: 18,
}

# =============================================================================
# Fixture pools (tests/fixtures/liquidity/pools.json)
# =============================================================================

WBTC_WETH_50_50 = "0xa6f548df93de924d73be7d25dc02554c6bd66db5"
BAL_WETH_60_40 = "0xc6a5032dc4bf638e15b4a66bc718ba7ba474ff73"
FOUR_TOKEN_25 = "0xd8833594420db3d6589c1098dbdd073f52419dba"
STABLE_3POOL = "0x06df3b2bbb68adc8b0e302443692037ed9f91b42"
STABLE_3POOL_MISSING_PRICE = "0x000f3b2bbb68adc8b0e302443692037ed9f91b42"
WSTETH_WETH_META = "0x32296969ef14eb0c6d29669c550d4a0449130230"
BOOSTED_USD = "0x7b50775383d3d6f0215a8f290f2c9e2eebbeceb2"
STABAL3_WETH_20_80 = "0x0b09dea16768f0799065c475be02919503cb2a35"
