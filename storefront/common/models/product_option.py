"""
Product option models.
Sizes and color swatches a product can be ordered in.
"""
from dataclasses import dataclass
from typing import Dict


@dataclass
class ProductSize:
    """Size label, e.g. "M" or "32"."""

    id: int
    product_id: int
    size: str
    available: bool = True

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "productId": self.product_id,
            "size": self.size,
            "available": self.available,
        }


@dataclass
class ProductColor:
    """Color swatch; `color` is the swatch value (hex), `color_name` the label."""

    id: int
    product_id: int
    color: str
    color_name: str

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "productId": self.product_id,
            "color": self.color,
            "colorName": self.color_name,
        }
