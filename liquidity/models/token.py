"""Pydantic models for token metadata and USD prices."""

from datetime import datetime

from pydantic import BaseModel, Field

from liquidity.models.types import Address, DecimalString


class TokenInfo(BaseModel):
    """Token metadata needed to scale raw balances."""

    address: Address
    # Some exotic tokens use more than 18 decimals, so we allow up to 77 (max for uint256)
    decimals: int = Field(ge=0, le=77)
    symbol: str | None = None

    model_config = {"frozen": True}


class PriceInfo(BaseModel):
    """USD unit price of a token.

    A price without `usd` is equivalent to no price at all: the token is
    treated as unpriced rather than worthless.
    """

    usd: DecimalString | None = None
    timestamp: datetime | None = None

    model_config = {"frozen": True}

    @property
    def is_known(self) -> bool:
        return self.usd is not None
