from typing import Dict, List, Optional, Sequence

from ..models.product import Product
from ..models.product_image import ProductImage
from ..models.review import Review
from ..services.aggregation import CartTotals, average_rating


def to_product_dto(product: Product, image: Optional[ProductImage], reviews: Sequence[Review]) -> Dict:
    """Product row annotated with its display image and review summary."""
    data = product.to_dict()
    data["image"] = image.to_dict() if image else None
    data["reviewCount"] = len(reviews)
    data["rating"] = average_rating(reviews)
    return data


def to_cart_dto(items: List[Dict], totals: CartTotals) -> Dict:
    return {
        "items": items,
        "subtotal": totals.subtotal,
        "total": totals.total,
        "count": totals.count,
    }
