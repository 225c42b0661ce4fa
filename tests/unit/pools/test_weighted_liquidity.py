"""Tests for weighted pool valuation.

This module tests:
- Summation when every price is known (weights unused)
- Imputation of a single missing price by weight ratio
- Failure with too many missing prices
"""

import pytest

from liquidity import DivisionByZero, InsufficientPriceData, LiquidityConfig
from liquidity.math import Bfp
from liquidity.pools import WeightedPoolLiquidity
from tests.helpers import BAL, DAI, USDC, WBTC, WETH, make_resolved_token


@pytest.fixture
def valuator() -> WeightedPoolLiquidity:
    return WeightedPoolLiquidity()


class TestAllPricesKnown:
    def test_sum_of_values(self, valuator):
        tokens = [
            make_resolved_token(WBTC, "10", "32000", weight="0.5"),
            make_resolved_token(WETH, "100", "3200", weight="0.5"),
        ]
        assert valuator.calc_total(tokens).format() == "640000.0"

    def test_weights_do_not_matter(self, valuator):
        """Same balances and prices under different weights give the same total."""
        balanced = [
            make_resolved_token(BAL, "300", "20", weight="0.6"),
            make_resolved_token(WETH, "1.25", "3200", weight="0.4"),
        ]
        skewed = [
            make_resolved_token(BAL, "300", "20", weight="0.98"),
            make_resolved_token(WETH, "1.25", "3200", weight="0.02"),
        ]
        assert valuator.calc_total(balanced) == valuator.calc_total(skewed)
        assert valuator.calc_total(balanced).format() == "10000.0"

    def test_value_is_truncated_per_token(self, valuator):
        tokens = [
            make_resolved_token(DAI, "0.000000000000000001", "0.5", weight="0.5"),
            make_resolved_token(USDC, "1", "1", weight="0.5"),
        ]
        # 10^-18 * 0.5 truncates to zero
        assert valuator.calc_total(tokens) == Bfp.from_int(1)


class TestImputation:
    def test_two_token_pool_imputed_by_weight_ratio(self, valuator):
        """value_missing = value_known * w_missing / w_known."""
        tokens = [
            make_resolved_token(WETH, "2.5", "3200", weight="0.8"),
            make_resolved_token(BAL, "1000", None, weight="0.2"),
        ]
        # 8000 known, 8000 * 0.2 / 0.8 = 2000 imputed
        assert valuator.calc_total(tokens).format() == "10000.0"

    def test_imputed_value_per_weight_matches_known(self, valuator):
        tokens = [
            make_resolved_token(WETH, "3.3", "3187.21", weight="0.6"),
            make_resolved_token(BAL, "123", None, weight="0.4"),
        ]
        total = valuator.calc_total(tokens)
        known = tokens[0].value()
        imputed = total.value - known.value
        # imputed / 0.4 == known / 0.6 within one unit of rounding per step
        assert abs(imputed * 6 - known.value * 4) <= 10

    def test_multiple_priced_tokens_anchor_together(self, valuator):
        tokens = [
            make_resolved_token(WBTC, "1", "32000", weight="0.25"),
            make_resolved_token(WETH, "10", "3200", weight="0.25"),
            make_resolved_token(DAI, "32000", "1", weight="0.25"),
            make_resolved_token(BAL, "1600", None, weight="0.25"),
        ]
        assert valuator.calc_total(tokens).format() == "128000.0"

    def test_two_missing_prices_raise(self, valuator):
        tokens = [
            make_resolved_token(WETH, "10", "3200", weight="0.5"),
            make_resolved_token(BAL, "1600", None, weight="0.25"),
            make_resolved_token(DAI, "32000", None, weight="0.25"),
        ]
        with pytest.raises(InsufficientPriceData, match="missing 2 prices"):
            valuator.calc_total(tokens)

    def test_two_missing_prices_allowed_by_config(self):
        valuator = WeightedPoolLiquidity(LiquidityConfig(weighted_max_missing_prices=2))
        tokens = [
            make_resolved_token(WETH, "10", "3200", weight="0.5"),
            make_resolved_token(BAL, "1600", None, weight="0.25"),
            make_resolved_token(DAI, "32000", None, weight="0.25"),
        ]
        assert valuator.calc_total(tokens).format() == "64000.0"

    def test_no_priced_tokens_raise(self, valuator):
        tokens = [
            make_resolved_token(WETH, "10", None, weight="0.5"),
            make_resolved_token(BAL, "1600", None, weight="0.5"),
        ]
        with pytest.raises(InsufficientPriceData, match="no priced tokens"):
            valuator.calc_total(tokens)

    def test_zero_known_weight_raises(self, valuator):
        tokens = [
            make_resolved_token(WETH, "10", "3200", weight="0"),
            make_resolved_token(BAL, "1600", None, weight="1"),
        ]
        with pytest.raises(DivisionByZero):
            valuator.calc_total(tokens)
