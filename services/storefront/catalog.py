"""
Read-only views over a list of products, as shown on the inventory page:
search, category filter, stock badges and the summary counters.

Products are plain dicts as returned by the products API.
"""
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

LOW_STOCK_THRESHOLD = 10


class InventoryStats(BaseModel):
    total_products: int
    total_items: int
    total_value: float


def stock_level(quantity: int) -> str:
    if quantity == 0:
        return "out-of-stock"
    if quantity < LOW_STOCK_THRESHOLD:
        return "low-stock"
    return "in-stock"


def filter_products(
    products: Iterable[Dict[str, Any]],
    search: Optional[str] = None,
    category: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Case-insensitive match on name or description, then exact category match."""
    filtered = list(products)

    if search:
        term = search.lower()
        filtered = [
            p for p in filtered
            if term in p["name"].lower()
            or (p.get("description") and term in p["description"].lower())
        ]

    if category:
        filtered = [p for p in filtered if p.get("category") == category]

    return filtered


def categories(products: Iterable[Dict[str, Any]]) -> List[str]:
    return sorted({p["category"] for p in products if p.get("category")})


def inventory_stats(products: Iterable[Dict[str, Any]]) -> InventoryStats:
    products = list(products)
    total_items = sum(p["quantity"] for p in products)
    total_value = sum(p["price"] * p["quantity"] for p in products)
    return InventoryStats(
        total_products=len(products),
        total_items=total_items,
        total_value=round(total_value, 2),
    )
