"""Tests for the Product dataclass."""

import pytest

from product_manager.models import PRODUCT_FIELDS, UPDATABLE_FIELDS, Product


class TestProductModel:
    """Test Product conversion to and from stored JSON objects."""

    def test_field_order(self):
        """Test that fields follow the stored key order."""
        assert PRODUCT_FIELDS == (
            "id", "title", "description", "price", "thumbnail", "code", "stock",
        )
        assert UPDATABLE_FIELDS == PRODUCT_FIELDS[1:]

    def test_from_dict_ignores_extra_keys(self):
        """Test that unknown stored keys are dropped."""
        product = Product.from_dict(
            {
                "id": 3,
                "title": "Yerba",
                "description": "1kg",
                "price": 9.99,
                "thumbnail": "yerba.png",
                "code": "YB-1",
                "stock": 0,
                "legacy": True,
            }
        )

        assert product == Product(3, "Yerba", "1kg", 9.99, "yerba.png", "YB-1", 0)

        print(f"Product loaded: {product}")

    def test_from_dict_missing_field(self):
        """Test that a record without every field raises KeyError."""
        with pytest.raises(KeyError):
            Product.from_dict({"id": 1, "title": "Incomplete"})

    @pytest.mark.parametrize("product_id", ["1", 1.0, None, True])
    def test_from_dict_rejects_non_integer_id(self, product_id):
        """Test that a stored id must be an integer."""
        data = {
            "id": product_id,
            "title": "Mate",
            "description": "Calabaza",
            "price": 200,
            "thumbnail": "Sin imagen",
            "code": "abc123",
            "stock": 25,
        }

        with pytest.raises(TypeError, match="id must be an integer"):
            Product.from_dict(data)

    def test_to_dict_key_order(self):
        """Test that to_dict keeps the storage key order."""
        product = Product(1, "Mate", "Calabaza", 200, "Sin imagen", "abc123", 25)

        assert list(product.to_dict().items()) == [
            ("id", 1),
            ("title", "Mate"),
            ("description", "Calabaza"),
            ("price", 200),
            ("thumbnail", "Sin imagen"),
            ("code", "abc123"),
            ("stock", 25),
        ]
