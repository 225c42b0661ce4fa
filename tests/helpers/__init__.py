"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Token and fixture pool addresses
- factories: Pool, resolved token and engine factory functions
"""

from tests.helpers.constants import (
    BAL,
    BB_A_DAI,
    BB_A_USDC,
    BB_A_USDT,
    DAI,
    SUSD,
    TOKEN_DECIMALS,
    USDC,
    USDT,
    WBTC,
    WETH,
    WSTETH,
)
from tests.helpers.factories import (
    make_engine,
    make_pool,
    make_price_provider,
    make_resolved_token,
    make_token_provider,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "WBTC",
    "BAL",
    "SUSD",
    "WSTETH",
    "BB_A_USDT",
    "BB_A_DAI",
    "BB_A_USDC",
    "TOKEN_DECIMALS",
    # Factories
    "make_pool",
    "make_resolved_token",
    "make_token_provider",
    "make_price_provider",
    "make_engine",
]
