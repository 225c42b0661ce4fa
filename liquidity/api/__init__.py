"""HTTP surface for the liquidity engine."""
