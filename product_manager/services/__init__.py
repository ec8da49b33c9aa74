"""Service modules."""

from product_manager.services.product_service import (
    ProductNotFoundError,
    ProductService,
    next_product_id,
)

__all__ = [
    "ProductNotFoundError",
    "ProductService",
    "next_product_id",
]
