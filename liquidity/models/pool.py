"""Pydantic models for Balancer pool snapshots.

The field layout follows the Balancer subgraph: parallel lists of token
addresses, raw balances and (depending on the pool type) weights and price
rates. camelCase aliases are accepted so subgraph JSON loads unchanged.
"""

from enum import Enum

from pydantic import BaseModel, Field

from liquidity.models.types import Address, DecimalString, PoolId, Uint256


class PoolKind(str, Enum):
    """Valuation strategy for a pool."""

    WEIGHTED = "Weighted"
    STABLE = "Stable"
    META_STABLE = "MetaStable"
    PHANTOM_STABLE = "PhantomStable"


class PoolSnapshot(BaseModel):
    """Immutable view of a pool's structure and reserves.

    Only syntactic validation happens here (addresses, integer balances,
    non-negative decimals). Structural invariants such as matching list
    lengths are checked by the engine so they surface as MalformedSnapshot.
    """

    id: PoolId
    address: Address
    pool_type: str = Field(alias="poolType")
    tokens: tuple[Address, ...]
    balances: tuple[Uint256, ...]
    weights: tuple[DecimalString, ...] | None = None
    price_rates: tuple[DecimalString, ...] | None = Field(default=None, alias="priceRates")
    swap_fee: DecimalString | None = Field(default=None, alias="swapFee")
    amp: DecimalString | None = None
    total_shares: DecimalString | None = Field(default=None, alias="totalShares")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def token_count(self) -> int:
        return len(self.tokens)

