from datetime import datetime
from types import SimpleNamespace

from storefront.common.models.product import Product
from storefront.common.models.review import Review
from storefront.common.services.aggregation import (
    average_rating,
    cart_totals,
    rating_breakdown,
    related_products,
)


def _review(rating):
    return Review(id=rating, product_id=1, rating=rating, title="", content="", author_name="", date=datetime(2024, 1, 1))


def _product(pid, category_id, price=10.0):
    return Product(id=pid, name=f"p{pid}", slug=f"p{pid}", description="", price=price, category_id=category_id)


def _line(price, quantity):
    return SimpleNamespace(product=SimpleNamespace(price=price), item=SimpleNamespace(quantity=quantity))


def test_average_rating():
    assert average_rating([]) == 0
    assert average_rating([_review(5), _review(4), _review(3)]) == 4
    assert average_rating([_review(5), _review(4)]) == 4.5


def test_rating_breakdown_always_has_five_rows():
    breakdown = rating_breakdown([_review(5), _review(5), _review(2)])

    assert breakdown == [
        {"stars": 5, "count": 2},
        {"stars": 4, "count": 0},
        {"stars": 3, "count": 0},
        {"stars": 2, "count": 1},
        {"stars": 1, "count": 0},
    ]
    assert [row["count"] for row in rating_breakdown([])] == [0, 0, 0, 0, 0]


def test_related_products_same_category_excluding_self_first_four():
    current = _product(1, category_id=1)
    candidates = [current] + [_product(i, category_id=1) for i in range(2, 8)] + [_product(9, category_id=2)]

    related = related_products(current, candidates)

    assert [p.id for p in related] == [2, 3, 4, 5]


def test_cart_totals_sum_price_times_quantity():
    totals = cart_totals([_line(100, 2), _line(19.99, 3)])

    assert totals.subtotal == 259.97
    assert totals.total == totals.subtotal
    assert totals.count == 5


def test_cart_totals_avoid_float_drift():
    assert cart_totals([_line(0.1, 3)]).subtotal == 0.3


def test_empty_cart_totals():
    totals = cart_totals([])

    assert (totals.subtotal, totals.total, totals.count) == (0, 0, 0)
