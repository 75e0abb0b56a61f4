"""Static tire price catalog and cart helpers"""

from typing import Dict, Sequence, Tuple
from credit_simulator.domain.models import CartItem, PriceCatalogEntry

DEFAULT_CATALOG: Tuple[PriceCatalogEntry, ...] = (
    PriceCatalogEntry(id="t1", label="315/80 R22.5", unit_price=300000.0),
    PriceCatalogEntry(id="t2", label="295/80 R22.5", unit_price=350000.0),
    PriceCatalogEntry(id="t3", label="385/65 R22.5", unit_price=400000.0),
)

# Term presets offered to the sales desk (months)
TERM_OPTIONS: Tuple[int, ...] = (3, 6, 12)


def price_index(catalog: Sequence[PriceCatalogEntry]) -> Dict[str, float]:
    """Map catalog id to unit price (first entry wins on repeated ids)"""
    prices: Dict[str, float] = {}
    for entry in catalog:
        prices.setdefault(entry.id, entry.unit_price)
    return prices


def adjust_cart(cart: Sequence[CartItem], catalog_id: str, change: int) -> Tuple[CartItem, ...]:
    """
    Return a new cart with the quantity of `catalog_id` changed by `change`.

    Quantities never drop below zero and lines that reach zero are removed.
    A negative change for an item not in the cart is a no-op.
    """
    items = list(cart)
    for index, item in enumerate(items):
        if item.catalog_id == catalog_id:
            new_quantity = max(0, item.quantity + change)
            if new_quantity == 0:
                del items[index]
            else:
                items[index] = CartItem(catalog_id=catalog_id, quantity=new_quantity)
            return tuple(items)

    if change > 0:
        items.append(CartItem(catalog_id=catalog_id, quantity=change))
    return tuple(items)
