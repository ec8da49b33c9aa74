"""Product model for file representation."""

from dataclasses import asdict, dataclass, fields
from typing import Union


@dataclass
class Product:
    """Product data model representing one stored product record."""

    id: int
    title: str
    description: str
    price: Union[int, float]
    thumbnail: str  # Image reference or URL
    code: str  # External product code, not checked for uniqueness
    stock: int

    def to_dict(self) -> dict:
        """Return the JSON object for this product, keys in storage order."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        """Build a Product from a stored JSON object.

        Raises:
            KeyError: If one of the product fields is missing.
            TypeError: If the id is not an integer.
        """
        product_id = data["id"]
        if not isinstance(product_id, int) or isinstance(product_id, bool):
            raise TypeError(f"Product id must be an integer, got {product_id!r}")
        return cls(**{name: data[name] for name in PRODUCT_FIELDS})


PRODUCT_FIELDS = tuple(f.name for f in fields(Product))
UPDATABLE_FIELDS = tuple(name for name in PRODUCT_FIELDS if name != "id")
