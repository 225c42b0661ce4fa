"""Configuration for the liquidity engine."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LiquidityConfig:
    """Centralized configuration for pool valuation.

    Attributes:
        weight_sum_tolerance: Maximum allowed distance between the sum of a
            weighted pool's normalized weights and 1.
        weighted_max_missing_prices: How many unpriced tokens a weighted pool
            may contain before valuation fails with InsufficientPriceData.
        stable_max_missing_prices: Same limit for Stable and PhantomStable
            pools, whose missing prices are imputed from the average price.
        max_nesting_depth: How deep nested pool tokens (a pool's BPT held by
            another pool) are valued through the pool provider.
    """

    weight_sum_tolerance: Decimal = Decimal("0.000001")

    # Imputation limits
    weighted_max_missing_prices: int = 1
    stable_max_missing_prices: int = 1

    max_nesting_depth: int = 4


# Default configuration instance
DEFAULT_LIQUIDITY_CONFIG = LiquidityConfig()
