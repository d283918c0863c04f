from typing import Dict, List, Optional

from ...services.catalog_store import CatalogStore, ProductFilter
from ..errors import NotFoundError
from ..models.product import Product
from ..utils.dto import to_product_dto
from .aggregation import average_rating, rating_breakdown, related_products


# ?filter= query values -> ProductFilter fields
LISTING_FILTERS = {
    "featured": "featured",
    "new": "new_arrival",
    "bestsellers": "best_seller",
    "toprated": "top_rated",
}


class CatalogService:
    """Catalog read views for the API.

    Responsibilities:
    - List categories
    - List products by category slug and merchandising filter, each
      annotated with its primary image, review count and mean rating
    - Assemble the product detail view (rating breakdown, related products)
    """

    def __init__(self, store: CatalogStore):
        self._store = store

    def list_categories(self) -> List[Dict]:
        return [c.to_dict() for c in self._store.get_categories()]

    def list_products(self, *, category: Optional[str] = None, filter_name: Optional[str] = None) -> List[Dict]:
        criteria = ProductFilter(category_slug=category or None)
        field = LISTING_FILTERS.get((filter_name or "").lower())
        if field:
            setattr(criteria, field, True)
        return [self._annotate(p) for p in self._store.get_products(criteria)]

    def get_product(self, slug: str) -> Dict:
        """Return the product detail view or raise NotFoundError."""
        details = self._store.get_product_with_details(slug)
        if details is None:
            raise NotFoundError("Product not found")

        siblings = self._store.get_products(ProductFilter(category_slug=details.category.slug))
        data = details.to_dict()
        data["rating"] = average_rating(details.reviews)
        data["ratingBreakdown"] = rating_breakdown(details.reviews)
        data["relatedProducts"] = [self._annotate(p) for p in related_products(details.product, siblings)]
        return data

    def _annotate(self, product: Product) -> Dict:
        return to_product_dto(
            product,
            self._store.get_primary_image(product.id),
            self._store.get_reviews(product.id),
        )
