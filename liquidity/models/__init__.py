"""Pydantic models for pool snapshots, token metadata and prices."""

from liquidity.models.pool import PoolKind, PoolSnapshot
from liquidity.models.token import PriceInfo, TokenInfo
from liquidity.models.types import (
    Address,
    DecimalString,
    PoolId,
    Uint256,
    is_valid_address,
    normalize_address,
)

__all__ = [
    # Types
    "Address",
    "DecimalString",
    "PoolId",
    "Uint256",
    "is_valid_address",
    "normalize_address",
    # Pool models
    "PoolKind",
    "PoolSnapshot",
    # Token models
    "TokenInfo",
    "PriceInfo",
]
