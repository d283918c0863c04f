from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class Product:
    id: int
    name: str
    slug: str
    description: str
    price: float
    category_id: int
    inspiration_brand: str = ""
    original_price: Optional[float] = None  # pre-discount price
    in_stock: bool = True
    details: str = ""
    comparison: str = ""
    material: str = ""
    featured: bool = False
    new_arrival: bool = False
    best_seller: bool = False
    top_rated: bool = False

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "price": self.price,
            "originalPrice": self.original_price,
            "inspirationBrand": self.inspiration_brand,
            "inStock": self.in_stock,
            "categoryId": self.category_id,
            "details": self.details,
            "comparison": self.comparison,
            "material": self.material,
            "featured": self.featured,
            "newArrival": self.new_arrival,
            "bestSeller": self.best_seller,
            "topRated": self.top_rated,
        }
