"""Mathematical utilities for the liquidity engine.

This package provides mathematical primitives for pool valuation:
- Bfp: 18-decimal fixed-point arithmetic (Balancer-style)
"""

from liquidity.math.fixed_point import ONE_18, SCALING_DECIMALS, Bfp, bfp_sum, format_fixed

__all__ = ["Bfp", "bfp_sum", "format_fixed", "ONE_18", "SCALING_DECIMALS"]
