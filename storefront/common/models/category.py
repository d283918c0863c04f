from dataclasses import dataclass
from typing import Dict


@dataclass
class Category:
    id: int
    name: str
    slug: str
    image_url: str

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "imageUrl": self.image_url,
        }
