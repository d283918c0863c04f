"""In-memory catalog storage: categories, products and their images, sizes, colors and reviews."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from ..common.models.category import Category
from ..common.models.product import Product
from ..common.models.product_image import ProductImage
from ..common.models.product_option import ProductColor, ProductSize
from ..common.models.review import Review
from ..common.utils.ids import IdAllocator
from ..common.utils.validators import ensure_non_negative, ensure_rating


@dataclass
class ProductFilter:
    """Product listing criteria; `None` means the criterion is not applied."""

    category_slug: Optional[str] = None
    featured: Optional[bool] = None
    new_arrival: Optional[bool] = None
    best_seller: Optional[bool] = None
    top_rated: Optional[bool] = None


_FLAG_FIELDS = ("featured", "new_arrival", "best_seller", "top_rated")


@dataclass
class ProductDetails:
    """A product with everything that hangs off it."""

    product: Product
    images: List[ProductImage]
    sizes: List[ProductSize]
    colors: List[ProductColor]
    reviews: List[Review]
    category: Category

    def to_dict(self) -> Dict:
        data = self.product.to_dict()
        data["images"] = [i.to_dict() for i in self.images]
        data["sizes"] = [s.to_dict() for s in self.sizes]
        data["colors"] = [c.to_dict() for c in self.colors]
        data["reviews"] = [r.to_dict() for r in self.reviews]
        data["category"] = self.category.to_dict()
        return data


class CatalogStore:
    """Process-lifetime catalog collections keyed by allocated integer ids.

    Referential integrity is not enforced: rows may point at products or
    categories that do not exist, and composite lookups skip or return
    `None` for them instead of raising.
    """

    def __init__(self, ids: Optional[IdAllocator] = None) -> None:
        self._ids = ids or IdAllocator()
        self._lock = threading.Lock()
        self._categories: Dict[int, Category] = {}
        self._products: Dict[int, Product] = {}
        self._images: Dict[int, ProductImage] = {}
        self._sizes: Dict[int, ProductSize] = {}
        self._colors: Dict[int, ProductColor] = {}
        self._reviews: Dict[int, Review] = {}

    # --- categories ---

    def get_categories(self) -> List[Category]:
        return list(self._categories.values())

    def get_category(self, category_id: int) -> Optional[Category]:
        return self._categories.get(category_id)

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        for category in self._categories.values():
            if category.slug == slug:
                return category
        return None

    def create_category(self, *, name: str, slug: str, image_url: str) -> Category:
        with self._lock:
            category = Category(
                id=self._ids.next_id("category"),
                name=name,
                slug=slug,
                image_url=image_url,
            )
            self._categories[category.id] = category
        return category

    # --- products ---

    def get_products(self, product_filter: Optional[ProductFilter] = None) -> List[Product]:
        """List products, narrowed by every criterion set on `product_filter`.

        An unknown category slug does not narrow the list: the category
        criterion only applies once the slug resolves to a category.
        """
        products = list(self._products.values())
        if product_filter is None:
            return products

        if product_filter.category_slug:
            category = self.get_category_by_slug(product_filter.category_slug)
            if category is not None:
                products = [p for p in products if p.category_id == category.id]

        for field in _FLAG_FIELDS:
            wanted = getattr(product_filter, field)
            if wanted is not None:
                products = [p for p in products if getattr(p, field) == wanted]
        return products

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def get_product_by_slug(self, slug: str) -> Optional[Product]:
        for product in self._products.values():
            if product.slug == slug:
                return product
        return None

    def get_product_with_details(self, slug: str) -> Optional[ProductDetails]:
        product = self.get_product_by_slug(slug)
        if product is None:
            return None
        category = self.get_category(product.category_id)
        if category is None:
            return None
        return ProductDetails(
            product=product,
            images=self.get_product_images(product.id),
            sizes=self.get_product_sizes(product.id),
            colors=self.get_product_colors(product.id),
            reviews=self.get_reviews(product.id),
            category=category,
        )

    def create_product(
        self,
        *,
        name: str,
        slug: str,
        description: str,
        price: float,
        category_id: int,
        inspiration_brand: str = "",
        original_price: Optional[float] = None,
        in_stock: bool = True,
        details: str = "",
        comparison: str = "",
        material: str = "",
        featured: bool = False,
        new_arrival: bool = False,
        best_seller: bool = False,
        top_rated: bool = False,
    ) -> Product:
        price = ensure_non_negative(price, "price")
        if original_price is not None:
            original_price = ensure_non_negative(original_price, "original_price")
        with self._lock:
            product = Product(
                id=self._ids.next_id("product"),
                name=name,
                slug=slug,
                description=description,
                price=price,
                category_id=category_id,
                inspiration_brand=inspiration_brand,
                original_price=original_price,
                in_stock=in_stock,
                details=details,
                comparison=comparison,
                material=material,
                featured=featured,
                new_arrival=new_arrival,
                best_seller=best_seller,
                top_rated=top_rated,
            )
            self._products[product.id] = product
        return product

    # --- images, sizes, colors, reviews ---

    def get_product_images(self, product_id: int) -> List[ProductImage]:
        return [i for i in self._images.values() if i.product_id == product_id]

    def get_primary_image(self, product_id: int) -> Optional[ProductImage]:
        """The image flagged primary, else the first registered one."""
        images = self.get_product_images(product_id)
        for image in images:
            if image.is_primary:
                return image
        return images[0] if images else None

    def create_product_image(self, *, product_id: int, image_url: str, is_primary: bool = False) -> ProductImage:
        with self._lock:
            image = ProductImage(
                id=self._ids.next_id("product_image"),
                product_id=product_id,
                image_url=image_url,
                is_primary=is_primary,
            )
            self._images[image.id] = image
        return image

    def get_product_sizes(self, product_id: int) -> List[ProductSize]:
        return [s for s in self._sizes.values() if s.product_id == product_id]

    def create_product_size(self, *, product_id: int, size: str, available: bool = True) -> ProductSize:
        with self._lock:
            row = ProductSize(
                id=self._ids.next_id("product_size"),
                product_id=product_id,
                size=size,
                available=available,
            )
            self._sizes[row.id] = row
        return row

    def get_product_colors(self, product_id: int) -> List[ProductColor]:
        return [c for c in self._colors.values() if c.product_id == product_id]

    def create_product_color(self, *, product_id: int, color: str, color_name: str) -> ProductColor:
        with self._lock:
            row = ProductColor(
                id=self._ids.next_id("product_color"),
                product_id=product_id,
                color=color,
                color_name=color_name,
            )
            self._colors[row.id] = row
        return row

    def get_reviews(self, product_id: int) -> List[Review]:
        return [r for r in self._reviews.values() if r.product_id == product_id]

    def create_review(
        self,
        *,
        product_id: int,
        rating: int,
        title: str,
        content: str,
        author_name: str,
        date: Optional[datetime] = None,
        verified_purchase: bool = False,
    ) -> Review:
        rating = ensure_rating(rating)
        with self._lock:
            review = Review(
                id=self._ids.next_id("review"),
                product_id=product_id,
                rating=rating,
                title=title,
                content=content,
                author_name=author_name,
                date=date or datetime.now(),
                verified_purchase=verified_purchase,
            )
            self._reviews[review.id] = review
        return review
