# src/models/product.py

"""Product data model shared by the catalog, queries and the cart."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Product:
    """A single sellable catalog item."""

    id: int
    name: str
    price: int
    category: str
    image: str = ""
    brand: str = ""
    rating: float = 0.0
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (catalog / handoff JSON layout)."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "image": self.image,
            "brand": self.brand,
            "rating": self.rating,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a Product from a catalog / handoff record."""
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            price=int(data["price"]),
            category=str(data["category"]),
            image=str(data.get("image", "")),
            brand=str(data.get("brand", "")),
            rating=float(data.get("rating", 0.0)),
            description=str(data.get("description", "")),
        )
