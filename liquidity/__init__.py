"""USD liquidity valuation for Balancer V2 pools."""

from liquidity.config import DEFAULT_LIQUIDITY_CONFIG, LiquidityConfig
from liquidity.engine import LiquidityEngine
from liquidity.errors import (
    DivisionByZero,
    InsufficientPriceData,
    LiquidityArithmeticError,
    LiquidityError,
    MalformedSnapshot,
    PoolNotFound,
    UnknownToken,
    UnsupportedPoolType,
)
from liquidity.models import PoolKind, PoolSnapshot, PriceInfo, TokenInfo

__version__ = "0.1.0"

__all__ = [
    # Engine
    "LiquidityEngine",
    # Config
    "LiquidityConfig",
    "DEFAULT_LIQUIDITY_CONFIG",
    # Models
    "PoolKind",
    "PoolSnapshot",
    "TokenInfo",
    "PriceInfo",
    # Errors
    "LiquidityError",
    "UnsupportedPoolType",
    "InsufficientPriceData",
    "LiquidityArithmeticError",
    "DivisionByZero",
    "MalformedSnapshot",
    "UnknownToken",
    "PoolNotFound",
]
