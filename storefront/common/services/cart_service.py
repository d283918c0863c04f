from typing import Dict

from ...services.cart_store import CartStore
from ...services.catalog_store import CatalogStore
from ..errors import CartOwnershipError, NotFoundError
from ..models.cart_item import CartItem
from ..models.product import Product
from ..schemas import AddCartItemRequest
from ..utils.dto import to_cart_dto
from .aggregation import cart_totals
from .logging import log_event


class CartService:
    """Session-scoped cart operations; every mutation returns the fresh cart snapshot."""

    def __init__(self, store: CartStore, catalog: CatalogStore):
        self._store = store
        self._catalog = catalog

    def get_cart(self, *, session_id: str) -> Dict:
        lines = self._store.get_cart_items(session_id)
        return to_cart_dto([line.to_dict() for line in lines], cart_totals(lines))

    def require_product(self, product_id: int) -> Product:
        product = self._catalog.get_product_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    def add_item(self, *, session_id: str, request: AddCartItemRequest) -> Dict:
        self.require_product(request.product_id)
        item = self._store.create_cart_item(
            session_id=session_id,
            product_id=request.product_id,
            quantity=request.quantity,
            size=request.size,
            color=request.color,
        )
        log_event(
            "info",
            "cart.item_added",
            item_id=item.id if item else None,
            product_id=request.product_id,
            quantity=request.quantity,
        )
        return self.get_cart(session_id=session_id)

    def update_item(self, *, session_id: str, item_id: int, quantity: int) -> Dict:
        self._owned_item(session_id, item_id)
        updated = self._store.update_cart_item_quantity(item_id, quantity)
        log_event("info", "cart.item_updated", item_id=item_id, quantity=quantity, removed=updated is None)
        return self.get_cart(session_id=session_id)

    def remove_item(self, *, session_id: str, item_id: int) -> Dict:
        self._owned_item(session_id, item_id, action="delete")
        self._store.delete_cart_item(item_id)
        log_event("info", "cart.item_removed", item_id=item_id)
        return self.get_cart(session_id=session_id)

    def clear_cart(self, *, session_id: str) -> Dict:
        removed = self._store.clear_cart(session_id)
        log_event("info", "cart.cleared", items=removed)
        return self.get_cart(session_id=session_id)

    def _owned_item(self, session_id: str, item_id: int, action: str = "modify") -> CartItem:
        item = self._store.get_cart_item(item_id)
        if item is None:
            raise NotFoundError("Cart item not found")
        if not session_id or item.session_id != session_id:
            raise CartOwnershipError(f"Not authorized to {action} this cart item")
        return item
