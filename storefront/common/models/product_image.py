from dataclasses import dataclass
from typing import Dict


@dataclass
class ProductImage:
    id: int
    product_id: int
    image_url: str
    is_primary: bool = False

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "productId": self.product_id,
            "imageUrl": self.image_url,
            "isPrimary": self.is_primary,
        }
