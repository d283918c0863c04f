"""Storefront Flask application: catalog browsing and a session-scoped cart API."""

from __future__ import annotations

from typing import Optional

from flask import Flask

from .common.services.cart_service import CartService
from .common.services.catalog_service import CatalogService
from .common.services.logging import configure_logging, log_event
from .common.utils.ids import IdAllocator
from .config import StorefrontConfig
from .routes import api
from .services import CartStore, CatalogStore, load_seed


def create_app(
    config: Optional[StorefrontConfig] = None,
    *,
    catalog_store: Optional[CatalogStore] = None,
    cart_store: Optional[CartStore] = None,
) -> Flask:
    config = config or StorefrontConfig.load()
    configure_logging(config.log_level)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.secret_key
    app.config["STOREFRONT_CONFIG"] = config

    ids = IdAllocator()
    seeded = catalog_store is None and config.seed_on_startup
    if catalog_store is None:
        catalog = CatalogStore(ids)
        if seeded:
            load_seed(catalog, config.seed_file)
    else:
        # injected stores arrive populated by their owner
        catalog = catalog_store
    cart = cart_store if cart_store is not None else CartStore(catalog, ids)

    components = {
        "catalog_store": catalog,
        "cart_store": cart,
        "catalog_service": CatalogService(catalog),
        "cart_service": CartService(cart, catalog),
    }
    app.extensions["storefront_components"] = components

    app.register_blueprint(api.api_bp)

    log_event("info", "app.started", seeded=seeded, products=len(catalog.get_products()))
    return app


def main() -> None:
    config = StorefrontConfig.load()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
