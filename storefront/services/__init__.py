"""In-memory stores backing the storefront."""

from .cart_store import CartLine, CartStore
from .catalog_store import CatalogStore, ProductDetails, ProductFilter
from .seed import load_seed

__all__ = [
    "CartLine",
    "CartStore",
    "CatalogStore",
    "ProductDetails",
    "ProductFilter",
    "load_seed",
]
