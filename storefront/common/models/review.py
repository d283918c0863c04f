from dataclasses import dataclass
from datetime import datetime
from typing import Dict


@dataclass
class Review:
    id: int
    product_id: int
    rating: int  # 1..5
    title: str
    content: str
    author_name: str
    date: datetime
    verified_purchase: bool = False

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "productId": self.product_id,
            "rating": self.rating,
            "title": self.title,
            "content": self.content,
            "authorName": self.author_name,
            "verifiedPurchase": self.verified_purchase,
            "date": self.date.isoformat(),
        }
