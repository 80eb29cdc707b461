"""
Discount strategies and the strategy registry (Open/Closed Principle).

BAD: `BadDiscountCalculator` hard-codes every customer category in one
if/elif chain. Adding a category means editing (and re-testing) that method,
so the class is open for modification.

GOOD: `StrategyRegistry` holds a mapping from category to a
`DiscountStrategy` (a Protocol). The dispatch method never changes; new
categories are added at runtime by calling `register()`.

Lookup rules:
  - Category keys are case-insensitive ("VIP" and "vip" are the same key).
  - The last registration for a key wins.
  - An unknown category yields a zero discount, not an error. Use `quote()`
    when the caller needs to tell a miss apart from a real zero discount.
  - Amounts are not range-checked: a negative amount produces a negative
    discount. Callers validate amounts upstream.
"""

import logging
import threading
from decimal import Decimal
from typing import Mapping, Protocol, runtime_checkable

from solid_examples.domain.models import DiscountQuote

logger = logging.getLogger(__name__)

Amount = Decimal | int | float | str


def to_decimal(amount: Amount) -> Decimal:
    """Coerce an amount to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") rather than its
    binary approximation.
    """
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


# ── BAD EXAMPLE ─────────────────────────────────────────────────────


class BadDiscountCalculator:
    """Every new customer type requires editing calculate_discount()."""

    def calculate_discount(self, customer_type: str, amount: Amount) -> Decimal:
        amount = to_decimal(amount)
        customer_type = customer_type.lower()
        if customer_type == "regular":
            return amount * Decimal("0.05")
        elif customer_type == "premium":
            return amount * Decimal("0.10")
        elif customer_type == "vip":
            return amount * Decimal("0.15")
        return Decimal(0)


# ── GOOD EXAMPLE ────────────────────────────────────────────────────


@runtime_checkable
class DiscountStrategy(Protocol):
    """Interface for computing the discount on an amount.

    Any object with a `compute_discount(amount) -> Decimal` method satisfies
    this protocol (structural subtyping, no inheritance needed).
    """

    def compute_discount(self, amount: Decimal) -> Decimal: ...


class RateDiscount:
    """Flat percentage discount. Subclasses only set RATE."""

    RATE: Decimal = Decimal(0)

    def compute_discount(self, amount: Decimal) -> Decimal:
        return amount * self.RATE

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rate={self.RATE})"


class RegularCustomerDiscount(RateDiscount):
    """Default category for returning customers."""

    RATE = Decimal("0.05")  # 5%


class PremiumCustomerDiscount(RateDiscount):
    """Paid membership tier."""

    RATE = Decimal("0.10")  # 10%


class VipCustomerDiscount(RateDiscount):
    """Top tier, matched case-insensitively as "vip"."""

    RATE = Decimal("0.15")  # 15%


class StudentDiscount(RateDiscount):
    """Not pre-seeded; the OCP demo registers it at runtime."""

    RATE = Decimal("0.20")  # 20%


class StrategyRegistry:
    """Maps a case-insensitive customer category to a DiscountStrategy.

    Registration replaces the whole mapping (copy-on-write) under a lock, so
    a lookup always sees a complete snapshot even if another thread is
    registering at the same time.
    """

    def __init__(self, strategies: Mapping[str, DiscountStrategy] | None = None) -> None:
        self._lock = threading.Lock()
        self._strategies: dict[str, DiscountStrategy] = {}
        for key, strategy in (strategies or {}).items():
            self.register(key, strategy)

    @classmethod
    def with_defaults(cls) -> "StrategyRegistry":
        """Registry pre-seeded with the built-in regular, premium and vip strategies."""
        return cls(
            {
                "regular": RegularCustomerDiscount(),
                "premium": PremiumCustomerDiscount(),
                "vip": VipCustomerDiscount(),
            }
        )

    @staticmethod
    def _normalize(key: str) -> str:
        return key.casefold()

    def register(self, key: str, strategy: DiscountStrategy) -> None:
        """Insert or overwrite the strategy for `key`.

        Raises ``ValueError`` for an empty or whitespace-only key.
        """
        if not key or not key.strip():
            raise ValueError("Discount category key must not be empty")
        normalized = self._normalize(key)
        with self._lock:
            updated = dict(self._strategies)
            updated[normalized] = strategy
            self._strategies = updated
        logger.info("Registered discount strategy %r for category %r", strategy, normalized)

    def _get(self, key: str) -> DiscountStrategy | None:
        with self._lock:
            snapshot = self._strategies
        return snapshot.get(self._normalize(key))

    def compute_discount(self, key: str, amount: Amount) -> Decimal:
        """Discount for `amount` under category `key`; zero for unknown categories.

        Never raises: any amount Decimal can hold, including infinity and
        NaN, is passed straight to the strategy.
        """
        amount = to_decimal(amount)
        strategy = self._get(key)
        if strategy is None:
            logger.debug("No discount strategy for category %r; applying zero discount", key)
            return Decimal(0)
        return strategy.compute_discount(amount)

    def quote(self, key: str, amount: Amount) -> DiscountQuote:
        """Like compute_discount(), but says whether a strategy matched."""
        amount = to_decimal(amount)
        strategy = self._get(key)
        if strategy is None:
            logger.debug("No discount strategy for category %r; applying zero discount", key)
            return DiscountQuote(category=key, amount=amount, discount=Decimal(0), matched=False)
        return DiscountQuote(
            category=key,
            amount=amount,
            discount=strategy.compute_discount(amount),
            matched=True,
        )

    def categories(self) -> list[str]:
        with self._lock:
            return sorted(self._strategies)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._get(key) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._strategies)
