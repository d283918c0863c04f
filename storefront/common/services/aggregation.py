"""Derived catalog and cart figures.

Nothing here is stored: ratings, histograms and cart totals are recomputed
from store output on every request.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from ..models.product import Product
from ..models.review import Review


RATING_STARS = (5, 4, 3, 2, 1)
RELATED_PRODUCTS_LIMIT = 4


@dataclass(frozen=True)
class CartTotals:
    subtotal: float
    total: float
    count: int


def average_rating(reviews: Sequence[Review]) -> float:
    """Arithmetic mean of review ratings, 0 when there are none."""
    if not reviews:
        return 0.0
    return sum(r.rating for r in reviews) / len(reviews)


def rating_breakdown(reviews: Sequence[Review]) -> List[Dict[str, int]]:
    """Review counts per star value, always five rows from 5 down to 1."""
    return [
        {"stars": stars, "count": sum(1 for r in reviews if r.rating == stars)}
        for stars in RATING_STARS
    ]


def related_products(
    product: Product,
    candidates: Iterable[Product],
    limit: int = RELATED_PRODUCTS_LIMIT,
) -> List[Product]:
    """Same-category products other than `product`, first `limit` in store order."""
    related = [
        p for p in candidates
        if p.category_id == product.category_id and p.id != product.id
    ]
    return related[:limit]


def cart_totals(lines: Iterable) -> CartTotals:
    """Totals over cart lines (anything with `.item.quantity` and `.product.price`).

    No tax, shipping or discounts: total equals subtotal.
    """
    subtotal = Decimal("0")
    count = 0
    for line in lines:
        subtotal += Decimal(str(line.product.price or 0)) * Decimal(line.item.quantity)
        count += line.item.quantity
    return CartTotals(subtotal=float(subtotal), total=float(subtotal), count=count)
