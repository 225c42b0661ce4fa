"""Request and response models for the liquidity API."""

from pydantic import BaseModel, Field

from liquidity.models import PoolSnapshot, PriceInfo, TokenInfo


class LiquidityRequest(BaseModel):
    """A pool to value, with the data the engine needs to value it."""

    pool: PoolSnapshot
    tokens: list[TokenInfo] = Field(description="Metadata for every token of the pool.")
    prices: dict[str, PriceInfo] = Field(
        default_factory=dict,
        description="USD prices keyed by token address. Tokens without an entry are unpriced.",
    )
    pools: list[PoolSnapshot] = Field(
        default_factory=list,
        description="Snapshots of nested pools whose BPT the pool holds.",
    )


class LiquidityResponse(BaseModel):
    """Computed USD liquidity of a pool."""

    pool: str
    pool_type: str = Field(alias="poolType")
    liquidity: str

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Typed valuation failure."""

    error: str
    detail: str
