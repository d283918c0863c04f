from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class CartItem:
    id: int
    session_id: str
    product_id: int
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None

    def merge_key(self):
        return (self.session_id, self.product_id, self.size, self.color)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "sessionId": self.session_id,
            "productId": self.product_id,
            "quantity": self.quantity,
            "size": self.size,
            "color": self.color,
        }
