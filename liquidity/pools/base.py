"""Base class and protocol for pool valuators."""

from __future__ import annotations

from typing import Protocol

from liquidity.errors import InsufficientPriceData
from liquidity.math import Bfp
from liquidity.models import PoolKind
from liquidity.pools.types import ResolvedToken


class PoolValuator(Protocol):
    """Protocol for pool-type specific liquidity calculation.

    Each valuator handles exactly one PoolKind and turns the resolved
    tokens of a pool into its total USD liquidity.
    """

    kind: PoolKind

    def calc_total(self, tokens: list[ResolvedToken]) -> Bfp:
        """Compute total USD liquidity of the pool.

        Args:
            tokens: Resolved tokens (pool BPT already excluded)

        Returns:
            Liquidity as 18-decimal fixed-point
        """
        ...


class BaseValuator:
    """Shared helpers for valuators."""

    kind: PoolKind

    def _split_by_price(
        self, tokens: list[ResolvedToken]
    ) -> tuple[list[ResolvedToken], list[ResolvedToken]]:
        """Partition tokens into (priced, unpriced), preserving order."""
        priced = [t for t in tokens if t.has_price]
        unpriced = [t for t in tokens if not t.has_price]
        return priced, unpriced

    def _check_imputable(
        self,
        priced: list[ResolvedToken],
        unpriced: list[ResolvedToken],
        max_missing: int,
    ) -> None:
        """Raise unless the missing prices can be imputed.

        Imputation needs at least one priced token to anchor on, and no
        more unpriced tokens than the valuator tolerates.
        """
        if not priced:
            raise InsufficientPriceData(
                f"{self.kind.value} pool has no priced tokens to impute from"
            )
        if len(unpriced) > max_missing:
            missing = ", ".join(t.address for t in unpriced)
            raise InsufficientPriceData(
                f"{self.kind.value} pool is missing {len(unpriced)} prices "
                f"(at most {max_missing} can be imputed): {missing}"
            )
