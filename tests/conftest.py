from datetime import datetime

import pytest

from storefront.app import create_app
from storefront.common.utils.ids import IdAllocator
from storefront.config import StorefrontConfig
from storefront.services import CartStore, CatalogStore


def build_catalog(store: CatalogStore) -> dict:
    """Small deterministic catalog: six tops, one pair of pants."""
    tops = store.create_category(name="Tops", slug="tops", image_url="/images/tops.png")
    pants = store.create_category(name="Pants", slug="pants", image_url="/images/pants.png")

    tee = store.create_product(name="Tee", slug="tee", description="Plain tee", price=100, category_id=tops.id, featured=True)
    store.create_product_image(product_id=tee.id, image_url="/images/tee.png", is_primary=True)

    hoodie = store.create_product(
        name="Hoodie", slug="hoodie", description="Heavy hoodie", price=150, original_price=199,
        category_id=tops.id, featured=True, best_seller=True, top_rated=True,
    )
    store.create_product_image(product_id=hoodie.id, image_url="/images/hoodie-back.png")
    store.create_product_image(product_id=hoodie.id, image_url="/images/hoodie-front.png", is_primary=True)
    for size in ("S", "M", "L"):
        store.create_product_size(product_id=hoodie.id, size=size)
    store.create_product_color(product_id=hoodie.id, color="#000000", color_name="Black")
    for rating in (5, 4, 4):
        store.create_review(
            product_id=hoodie.id, rating=rating, title="Review", content="Nice",
            author_name="Sam", verified_purchase=True, date=datetime(2023, 10, 15),
        )

    jacket = store.create_product(name="Jacket", slug="jacket", description="Shell", price=200, category_id=tops.id, new_arrival=True)
    store.create_product_image(product_id=jacket.id, image_url="/images/jacket.png")

    # no images: never shows up in a cart snapshot
    ghost = store.create_product(name="Ghost", slug="ghost", description="No photos", price=50, category_id=tops.id)

    cap = store.create_product(name="Cap", slug="cap", description="Cap", price=30, category_id=tops.id)
    store.create_product_image(product_id=cap.id, image_url="/images/cap.png")
    vest = store.create_product(name="Vest", slug="vest", description="Vest", price=60, category_id=tops.id)
    store.create_product_image(product_id=vest.id, image_url="/images/vest.png")

    cargo = store.create_product(name="Cargo", slug="cargo", description="Cargo pants", price=80, category_id=pants.id, featured=True)
    store.create_product_image(product_id=cargo.id, image_url="/images/cargo.png", is_primary=True)

    return {
        "tops": tops,
        "pants": pants,
        "tee": tee,
        "hoodie": hoodie,
        "jacket": jacket,
        "ghost": ghost,
        "cap": cap,
        "vest": vest,
        "cargo": cargo,
    }


@pytest.fixture
def ids():
    return IdAllocator()


@pytest.fixture
def catalog(ids):
    return CatalogStore(ids)


@pytest.fixture
def seeded(catalog):
    return build_catalog(catalog)


@pytest.fixture
def cart(catalog, ids):
    return CartStore(catalog, ids)


@pytest.fixture
def config():
    return StorefrontConfig(seed_on_startup=False, log_level="WARNING")


@pytest.fixture
def app(config, catalog, seeded, cart):
    app = create_app(config, catalog_store=catalog, cart_store=cart)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
