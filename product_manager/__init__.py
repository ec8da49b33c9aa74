"""File-backed product manager."""

from product_manager.clients import CorruptStorageError
from product_manager.models import Product
from product_manager.services import ProductNotFoundError, ProductService

__all__ = [
    "CorruptStorageError",
    "Product",
    "ProductNotFoundError",
    "ProductService",
]
