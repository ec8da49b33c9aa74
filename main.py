import logging

from dotenv import load_dotenv

from product_manager.config import get_config
from product_manager.services import ProductService

load_dotenv()


def main():
    """Walk through the product lifecycle against the configured products file."""
    config = get_config()
    logging.basicConfig(level=config.logging.level_number)

    product_service = ProductService.from_config(config)
    print(f"Using products file: {product_service.path}\n")

    print("Products at start:", product_service.list_products())

    product_service.add_product(
        title="producto prueba",
        description="Este es un producto prueba",
        price=200,
        thumbnail="Sin imagen",
        code="abc123",
        stock=25,
    )
    products = product_service.list_products()
    print("Products after add:", products)

    product_id = products[-1].id
    product = product_service.get_product_by_id(product_id)
    if product:
        print("Product found:", product)
    else:
        print(f"Product with id {product_id} not found.")

    product_service.update_product(product_id, {"price": 250, "stock": 20})
    print("Products after update:", product_service.list_products())

    product_service.delete_product(product_id)
    print("Products after delete:", product_service.list_products())
    print(f"\nCheck {product_service.path} to confirm product {product_id} is gone.")


if __name__ == "__main__":
    main()
