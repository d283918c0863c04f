"""Startup seeding of the in-memory catalog from a JSON file."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from ..common.services.logging import log_event
from .catalog_store import CatalogStore


def load_seed(store: CatalogStore, data_file: Path) -> Dict[str, int]:
    """Create every category and product described in `data_file`.

    Products reference their category by slug and nest their images, sizes,
    colors and reviews. Returns how many rows of each kind were created.
    """

    payload = _read(data_file)
    counts = {"categories": 0, "products": 0, "images": 0, "sizes": 0, "colors": 0, "reviews": 0}

    for entry in _entries(payload, "categories"):
        store.create_category(
            name=str(entry.get("name", "")),
            slug=str(entry["slug"]),
            image_url=str(entry.get("imageUrl", "")),
        )
        counts["categories"] += 1

    for entry in _entries(payload, "products"):
        slug = str(entry["slug"])
        category = store.get_category_by_slug(str(entry.get("category", "")))
        if category is None:
            raise ValueError(f"Seed product {slug!r} references unknown category {entry.get('category')!r}.")
        product = store.create_product(
            name=str(entry.get("name", slug)),
            slug=slug,
            description=str(entry.get("description", "")),
            price=entry.get("price"),
            original_price=entry.get("originalPrice"),
            inspiration_brand=str(entry.get("inspirationBrand", "")),
            in_stock=bool(entry.get("inStock", True)),
            category_id=category.id,
            details=str(entry.get("details", "")),
            comparison=str(entry.get("comparison", "")),
            material=str(entry.get("material", "")),
            featured=bool(entry.get("featured", False)),
            new_arrival=bool(entry.get("newArrival", False)),
            best_seller=bool(entry.get("bestSeller", False)),
            top_rated=bool(entry.get("topRated", False)),
        )
        counts["products"] += 1

        for image in entry.get("images", []):
            store.create_product_image(
                product_id=product.id,
                image_url=str(image["imageUrl"]),
                is_primary=bool(image.get("isPrimary", False)),
            )
            counts["images"] += 1
        for size in entry.get("sizes", []):
            # plain labels are shorthand for an available size
            if isinstance(size, str):
                size = {"size": size}
            store.create_product_size(
                product_id=product.id,
                size=str(size["size"]),
                available=bool(size.get("available", True)),
            )
            counts["sizes"] += 1
        for color in entry.get("colors", []):
            store.create_product_color(
                product_id=product.id,
                color=str(color["color"]),
                color_name=str(color.get("colorName", color["color"])),
            )
            counts["colors"] += 1
        for review in entry.get("reviews", []):
            store.create_review(
                product_id=product.id,
                rating=review.get("rating"),
                title=str(review.get("title", "")),
                content=str(review.get("content", "")),
                author_name=str(review.get("authorName", "Anonymous")),
                verified_purchase=bool(review.get("verifiedPurchase", False)),
                date=datetime.fromisoformat(review["date"]) if review.get("date") else None,
            )
            counts["reviews"] += 1

    log_event("info", "catalog.seeded", source=str(data_file), **counts)
    return counts


def _read(data_file: Path) -> Dict[str, Any]:
    text = Path(data_file).read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Seed catalog {data_file} is not valid JSON.") from exc
    if not isinstance(payload, dict):
        raise ValueError("Seed catalog must be an object with 'categories' and 'products' arrays.")
    return payload


def _entries(payload: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    entries = payload.get(key, [])
    if not isinstance(entries, list):
        raise ValueError(f"Seed catalog '{key}' must be an array.")
    return [e for e in entries if isinstance(e, dict)]
