"""
Default strategy functions for the seller report.

Both are passed to ``analyzer.analyze`` through its ``options`` mapping, so a
caller can swap in a different discount model or bonus curve without touching
the aggregation itself.
"""

from collections.abc import Mapping
from typing import Any, Optional

from . import settings
from .schemas import SellerStat


def calculate_simple_revenue(item: Mapping[str, Any], _product: Optional[Mapping[str, Any]]) -> float:
    """
    Revenue of one line item with its percentage discount applied.
    The product card is accepted for signature compatibility but not used.
    """
    discount = item.get("discount") or 0
    return (item.get("sale_price") or 0) * (item.get("quantity") or 0) * (1 - discount / 100)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStat | Mapping[str, Any]) -> float:
    """
    Bonus based on the seller's position in the profit ranking.

    - 1st place: 15% of profit
    - 2nd and 3rd place: 10%
    - last place: nothing
    - everyone else: 5%

    Ranks are checked in that order, so a lone seller is both first and last
    and still gets the first-place bonus.
    """
    profit = seller["profit"] if isinstance(seller, Mapping) else seller.profit

    if index in settings.BONUS_RATES_BY_RANK:
        return profit * settings.BONUS_RATES_BY_RANK[index]
    if index == total - 1:
        return 0
    return profit * settings.DEFAULT_BONUS_RATE


DEFAULT_OPTIONS = {
    "calculate_revenue": calculate_simple_revenue,
    "calculate_bonus": calculate_bonus_by_profit,
}
