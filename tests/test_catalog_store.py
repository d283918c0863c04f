import pytest

from storefront.services import ProductFilter


def test_ids_are_monotonic_per_entity_kind(catalog):
    first = catalog.create_category(name="A", slug="a", image_url="/a.png")
    second = catalog.create_category(name="B", slug="b", image_url="/b.png")
    product = catalog.create_product(name="P", slug="p", description="", price=1, category_id=first.id)

    assert (first.id, second.id) == (1, 2)
    assert product.id == 1


def test_categories_keep_insertion_order(catalog, seeded):
    assert [c.slug for c in catalog.get_categories()] == ["tops", "pants"]
    assert catalog.get_category_by_slug("pants").id == seeded["pants"].id
    assert catalog.get_category_by_slug("shoes") is None


def test_product_lookups(catalog, seeded):
    assert catalog.get_product_by_id(seeded["tee"].id).slug == "tee"
    assert catalog.get_product_by_slug("cargo").id == seeded["cargo"].id
    assert catalog.get_product_by_id(999) is None
    assert catalog.get_product_by_slug("nope") is None


def test_featured_filter_returns_only_featured(catalog, seeded):
    products = catalog.get_products(ProductFilter(featured=True))

    assert [p.slug for p in products] == ["tee", "hoodie", "cargo"]
    assert all(p.featured for p in products)


def test_category_and_flag_filters_combine(catalog, seeded):
    products = catalog.get_products(ProductFilter(category_slug="tops", featured=True))

    assert [p.slug for p in products] == ["tee", "hoodie"]


def test_false_flag_is_an_equality_filter(catalog, seeded):
    products = catalog.get_products(ProductFilter(category_slug="tops", featured=False))

    assert [p.slug for p in products] == ["jacket", "ghost", "cap", "vest"]


def test_unknown_category_slug_leaves_listing_unfiltered(catalog, seeded):
    everything = catalog.get_products()

    assert catalog.get_products(ProductFilter(category_slug="unknown")) == everything
    featured = catalog.get_products(ProductFilter(category_slug="unknown", featured=True))
    assert [p.slug for p in featured] == ["tee", "hoodie", "cargo"]


def test_product_with_details(catalog, seeded):
    details = catalog.get_product_with_details("hoodie")

    assert details.product.id == seeded["hoodie"].id
    assert details.category.slug == "tops"
    assert [s.size for s in details.sizes] == ["S", "M", "L"]
    assert [c.color_name for c in details.colors] == ["Black"]
    assert [r.rating for r in details.reviews] == [5, 4, 4]
    assert len(details.images) == 2


def test_product_with_details_needs_product_and_category(catalog, seeded):
    catalog.create_product(name="Orphan", slug="orphan", description="", price=10, category_id=999)

    assert catalog.get_product_with_details("missing") is None
    assert catalog.get_product_with_details("orphan") is None


def test_primary_image_prefers_flag_then_first(catalog, seeded):
    assert catalog.get_primary_image(seeded["hoodie"].id).image_url == "/images/hoodie-front.png"
    assert catalog.get_primary_image(seeded["jacket"].id).image_url == "/images/jacket.png"
    assert catalog.get_primary_image(seeded["ghost"].id) is None


def test_child_rows_are_scoped_to_product(catalog, seeded):
    assert catalog.get_product_sizes(seeded["tee"].id) == []
    assert catalog.get_reviews(seeded["tee"].id) == []
    assert [i.image_url for i in catalog.get_product_images(seeded["hoodie"].id)] == [
        "/images/hoodie-back.png",
        "/images/hoodie-front.png",
    ]


@pytest.mark.parametrize("rating", [0, 6, 4.5, None])
def test_review_rating_must_be_one_to_five(catalog, seeded, rating):
    with pytest.raises(ValueError):
        catalog.create_review(product_id=seeded["tee"].id, rating=rating, title="t", content="c", author_name="a")


def test_negative_price_is_rejected(catalog, seeded):
    with pytest.raises(ValueError):
        catalog.create_product(name="Bad", slug="bad", description="", price=-1, category_id=seeded["tops"].id)
