"""Product service for managing products stored in a JSON file.

Every operation loads the whole collection from disk, applies one change and
writes the whole collection back:
- Nothing is cached between calls
- Ids are max(existing ids) + 1, so deleting the newest product frees its id
- Single writer only; concurrent callers can overwrite each other's changes
"""

import dataclasses
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from ..clients import CorruptStorageError, JsonFileClient
from ..config import AppConfig
from ..models import UPDATABLE_FIELDS, Product

logger = logging.getLogger(__name__)


class ProductNotFoundError(Exception):
    """Raised when no product matches the requested id."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with id {product_id} not found.")


def next_product_id(products: List[Product]) -> int:
    """Return the id for a new product: 1 for an empty list, max id + 1 otherwise."""
    if not products:
        return 1
    return max(product.id for product in products) + 1


def _find_index(products: List[Product], product_id: int) -> int:
    for index, product in enumerate(products):
        if product.id == product_id:
            return index
    return -1


class ProductService:
    """Service for CRUD operations on the product file."""

    def __init__(
        self,
        path: Union[str, Path],
        strict_reads: bool = False,
        indent: int = 2,
    ):
        """Initialize the product service. The file is not touched until the first call.

        Args:
            path: Path to the JSON products file.
            strict_reads: Raise CorruptStorageError on unreadable content instead of
                treating it as an empty collection.
            indent: Indentation used when writing the file.
        """
        self._client = JsonFileClient(path, indent=indent)
        self._strict_reads = strict_reads

    @classmethod
    def from_config(cls, config: AppConfig) -> "ProductService":
        """Build a service from the application configuration."""
        return cls(
            config.storage.path,
            strict_reads=config.storage.strict_reads,
            indent=config.storage.indent,
        )

    @property
    def path(self) -> Path:
        """Get the products file path."""
        return self._client.path

    def list_products(self) -> List[Product]:
        """Get all products in insertion order.

        A missing file is an empty collection. Unreadable content is also an
        empty collection unless strict reads are enabled.

        Returns:
            List of Product objects.

        Raises:
            CorruptStorageError: Only with strict reads, if the file cannot be parsed.
        """
        try:
            raw = self._client.read()
            return [Product.from_dict(item) for item in raw]
        except FileNotFoundError:
            logger.debug(f"Products file {self.path} does not exist yet")
            return []
        except (KeyError, TypeError) as e:
            error = CorruptStorageError(self.path, f"invalid product record ({e!r})")
            return self._recover(error)
        except UnicodeDecodeError as e:
            return self._recover(CorruptStorageError(self.path, str(e)))
        except CorruptStorageError as e:
            return self._recover(e)
        except OSError as e:
            if self._strict_reads:
                raise
            logger.warning(f"Could not read {self.path}: {e}. Treating as empty.")
            return []

    def _recover(self, error: CorruptStorageError) -> List[Product]:
        if self._strict_reads:
            raise error
        logger.warning(f"{error}. Treating as empty.")
        return []

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        """Get a product by its id.

        Args:
            product_id: Id of the product.

        Returns:
            Product if found, None otherwise.
        """
        products = self.list_products()
        index = _find_index(products, product_id)
        return products[index] if index != -1 else None

    def add_product(
        self,
        title: str,
        description: str,
        price: Union[int, float],
        thumbnail: str,
        code: str,
        stock: int,
    ) -> None:
        """Append a new product with a generated id and save the file.

        Values are stored as given.

        Raises:
            OSError: If the file cannot be written.
        """
        products = self.list_products()
        new_product = Product(
            id=next_product_id(products),
            title=title,
            description=description,
            price=price,
            thumbnail=thumbnail,
            code=code,
            stock=stock,
        )
        products.append(new_product)
        self._save(products)

        logger.info(f"Added product {new_product.id}: {title}")

    def update_product(self, product_id: int, updated_fields: Mapping[str, object]) -> None:
        """Merge new field values into an existing product and save the file.

        Fields not given keep their value. The id never changes: an "id" key
        in updated_fields is ignored.

        Args:
            product_id: Id of the product to update.
            updated_fields: Field names mapped to their new values.

        Raises:
            ProductNotFoundError: If no product has this id.
            ValueError: If updated_fields names a field a product does not have.
            OSError: If the file cannot be written.
        """
        products = self.list_products()
        index = _find_index(products, product_id)
        if index == -1:
            raise ProductNotFoundError(product_id)

        changes = dict(updated_fields)
        if "id" in changes:
            logger.warning(f"Ignoring 'id' in update payload for product {product_id}")
            del changes["id"]

        unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
        if unknown:
            raise ValueError(
                f"Unknown product fields: {', '.join(unknown)}. "
                f"Expected any of: {', '.join(UPDATABLE_FIELDS)}."
            )

        products[index] = dataclasses.replace(products[index], **changes)
        self._save(products)

        logger.info(f"Updated product {product_id}: {', '.join(changes) or 'no changes'}")

    def delete_product(self, product_id: int) -> None:
        """Remove a product and save the file.

        Args:
            product_id: Id of the product to delete.

        Raises:
            ProductNotFoundError: If no product has this id.
            OSError: If the file cannot be written.
        """
        products = self.list_products()
        index = _find_index(products, product_id)
        if index == -1:
            raise ProductNotFoundError(product_id)

        del products[index]
        self._save(products)

        logger.info(f"Deleted product {product_id}")

    def _save(self, products: List[Product]) -> None:
        self._client.write([product.to_dict() for product in products])
