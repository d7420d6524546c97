import logging
import math
from collections.abc import Mapping, Sequence
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable

from . import settings
from .errors import InvalidInputError, InvalidOptionsError
from .schemas import SellerReport, SellerStat, TopProduct

logger = logging.getLogger(__name__)

REQUIRED_COLLECTIONS = ("products", "sellers", "purchase_records")

# Python-style option keys first, camelCase names accepted as aliases.
STRATEGY_KEYS = {
    "calculate_revenue": ("calculate_revenue", "calculateRevenue"),
    "calculate_bonus": ("calculate_bonus", "calculateBonus"),
}


def _is_collection(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _validate_data(data: Any) -> None:
    if not isinstance(data, Mapping):
        raise InvalidInputError("Sales data must be a mapping of collections.")

    for key in REQUIRED_COLLECTIONS:
        collection = data.get(key)
        if not _is_collection(collection) or len(collection) == 0:
            raise InvalidInputError(f"'{key}' must be a non-empty list.")


def _resolve_strategies(options: Any) -> dict[str, Callable]:
    if not isinstance(options, Mapping):
        raise InvalidOptionsError("Options must be a mapping.")

    strategies = {}
    for name, aliases in STRATEGY_KEYS.items():
        func = next((options[key] for key in aliases if key in options), None)
        if not callable(func):
            raise InvalidOptionsError(f"Options are missing a callable '{name}'.")
        strategies[name] = func
    return strategies


def format_seller_name(seller: Mapping[str, Any]) -> str:
    """Full name of a seller, or the fallback name when both parts are empty."""
    first_name = seller.get("first_name") or ""
    last_name = seller.get("last_name") or ""
    return f"{first_name} {last_name}".strip() or settings.UNKNOWN_SELLER_NAME


def round_money(value: float) -> float:
    """
    Rounds half-up to 2 decimals, the way fixed-point formatting does.
    Infinite and NaN values from a custom strategy pass through unchanged.
    """
    if not math.isfinite(value):
        return float(value)
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def rank_top_products(
    products_sold: Mapping[str, int | float], limit: int = settings.TOP_PRODUCTS_LIMIT
) -> list[TopProduct]:
    """Best sellers first; equal quantities are ordered by SKU."""
    ranked = sorted(products_sold.items(), key=lambda entry: (-entry[1], entry[0]))
    return [TopProduct(sku=sku, quantity=quantity) for sku, quantity in ranked[:limit]]


def _accumulate_record(
    stat: SellerStat,
    record: Mapping[str, Any],
    product_index: dict[str, Mapping[str, Any]],
    calculate_revenue: Callable,
) -> None:
    # Every record counts as one sale, even without line items.
    stat.sales_count += 1
    stat.revenue += record.get("total_amount") or 0

    items = record.get("items")
    if not _is_collection(items):
        return

    for item in items:
        sku_key = str(item.get("sku"))
        product = product_index.get(sku_key)

        revenue_item = calculate_revenue(item, product)
        quantity = item.get("quantity") or 0
        cost = (product.get("purchase_price") or 0) * quantity if product is not None else 0
        stat.profit += revenue_item - cost

        stat.products_sold[sku_key] = stat.products_sold.get(sku_key, 0) + quantity


def analyze(data: Mapping[str, Any], options: Mapping[str, Callable]) -> list[SellerReport]:
    """
    Builds the per-seller sales report.

    Args:
        data: mapping with non-empty ``products``, ``sellers`` and
            ``purchase_records`` lists. Other keys (e.g. ``customers``) are ignored.
        options: mapping with the two strategy functions,
            ``calculate_revenue(item, product)`` and
            ``calculate_bonus(index, total, seller_stat)``.

    Returns:
        One ``SellerReport`` per seller, ordered by profit (highest first).
        Sellers with equal profit keep their input order.

    Raises:
        InvalidInputError: ``data`` or one of its collections is missing or empty.
        InvalidOptionsError: ``options`` lacks a callable strategy.
    """
    _validate_data(data)
    strategies = _resolve_strategies(options)
    calculate_revenue = strategies["calculate_revenue"]
    calculate_bonus = strategies["calculate_bonus"]

    # --- 1. One accumulator per seller, including sellers without sales ---
    seller_stats = [
        SellerStat(seller_id=seller.get("id"), name=format_seller_name(seller))
        for seller in data["sellers"]
    ]
    # Keys are compared as strings, so seller_id "1" matches id 1.
    seller_index = {str(stat.seller_id): stat for stat in seller_stats}
    product_index = {str(product.get("sku")): product for product in data["products"]}

    # --- 2. Scan purchase records ---
    skipped = 0
    for record in data["purchase_records"]:
        stat = seller_index.get(str(record.get("seller_id")))
        if stat is None:
            skipped += 1
            logger.debug(f"Skipping record for unknown seller: {record.get('seller_id')!r}")
            continue
        _accumulate_record(stat, record, product_index, calculate_revenue)

    if skipped:
        logger.info(f"⚠️ Skipped {skipped} purchase record(s) with an unknown seller.")

    # --- 3. Rank by profit (stable, so ties keep input order) ---
    seller_stats.sort(key=lambda stat: stat.profit, reverse=True)

    # --- 4. Bonus and top products ---
    total_sellers = len(seller_stats)
    for index, stat in enumerate(seller_stats):
        stat.bonus = calculate_bonus(index, total_sellers, stat)
        stat.top_products = rank_top_products(stat.products_sold)

    logger.info(
        f"✅ Analyzed {len(data['purchase_records']) - skipped} purchase record(s) "
        f"for {total_sellers} seller(s)."
    )

    # --- 5. Final report rows ---
    return [
        SellerReport(
            seller_id=stat.seller_id,
            name=stat.name,
            revenue=round_money(stat.revenue),
            profit=round_money(stat.profit),
            sales_count=stat.sales_count,
            top_products=stat.top_products,
            bonus=round_money(stat.bonus),
        )
        for stat in seller_stats
    ]
