"""In-memory cart storage keyed by item id and scoped by session id."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..common.models.cart_item import CartItem
from ..common.models.product import Product
from ..common.models.product_image import ProductImage
from ..common.utils.ids import IdAllocator
from .catalog_store import CatalogStore


@dataclass
class CartLine:
    """A cart row joined with its product and display image."""

    item: CartItem
    product: Product
    image: ProductImage

    def to_dict(self) -> Dict:
        data = self.item.to_dict()
        data["product"] = self.product.to_dict()
        data["image"] = self.image.to_dict()
        return data


class CartStore:
    """Cart rows for every session.

    Adding a (product, size, color) combination a session already holds
    raises that row's quantity instead of inserting a second row. The scan
    and the write happen under one lock so concurrent adds cannot both
    insert.
    """

    def __init__(self, catalog: CatalogStore, ids: Optional[IdAllocator] = None) -> None:
        self._catalog = catalog
        self._ids = ids or IdAllocator()
        self._lock = threading.RLock()
        self._items: Dict[int, CartItem] = {}

    def get_cart_items(self, session_id: str) -> List[CartLine]:
        """Session rows joined with product and primary image.

        Rows whose product or image no longer resolves are left out.
        """
        lines: List[CartLine] = []
        for item in self._session_items(session_id):
            product = self._catalog.get_product_by_id(item.product_id)
            if product is None:
                continue
            image = self._catalog.get_primary_image(product.id)
            if image is None:
                continue
            lines.append(CartLine(item=item, product=product, image=image))
        return lines

    def get_cart_item(self, item_id: int) -> Optional[CartItem]:
        return self._items.get(item_id)

    def create_cart_item(
        self,
        *,
        session_id: str,
        product_id: int,
        quantity: Optional[int] = None,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Optional[CartItem]:
        qnty = 1 if quantity is None else int(quantity)
        key = (session_id, product_id, size, color)
        with self._lock:
            existing = next((it for it in self._items.values() if it.merge_key() == key), None)
            if existing is not None:
                return self.update_cart_item_quantity(existing.id, existing.quantity + qnty)
            if qnty <= 0:
                raise ValueError("quantity must be > 0")
            item = CartItem(
                id=self._ids.next_id("cart_item"),
                session_id=session_id,
                product_id=product_id,
                quantity=qnty,
                size=size,
                color=color,
            )
            self._items[item.id] = item
            return item

    def update_cart_item_quantity(self, item_id: int, quantity: int) -> Optional[CartItem]:
        """Overwrite a row's quantity; zero or less removes the row.

        Returns the updated row, or None when the row is missing or was removed.
        """
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                return None
            if quantity <= 0:
                del self._items[item_id]
                return None
            item.quantity = int(quantity)
            return item

    def delete_cart_item(self, item_id: int) -> None:
        with self._lock:
            self._items.pop(item_id, None)

    def clear_cart(self, session_id: str) -> int:
        with self._lock:
            doomed = [it.id for it in self._session_items(session_id)]
            for item_id in doomed:
                del self._items[item_id]
        return len(doomed)

    def _session_items(self, session_id: str) -> List[CartItem]:
        with self._lock:
            return [it for it in self._items.values() if it.session_id == session_id]
