"""Data models module."""

from product_manager.models.product import PRODUCT_FIELDS, UPDATABLE_FIELDS, Product

__all__ = ["Product", "PRODUCT_FIELDS", "UPDATABLE_FIELDS"]
