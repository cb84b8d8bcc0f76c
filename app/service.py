"""
Product operations on top of the store.
"""

from app.errors import NotFoundError, ValidationError


def validate_product(name, price):
    """Raise ValidationError unless both fields are present and truthy."""
    if not name or not price:
        raise ValidationError()


class ProductService:
    """
    Maps each product operation to a single statement on the store.
    The store is injected so tests can pass a fake.
    """

    def __init__(self, store):
        self.store = store

    def list_products(self) -> list:
        return self.store.fetch_all()

    def create_product(self, name, price) -> dict:
        validate_product(name, price)
        product_id = self.store.insert(name, price)
        return {"id": product_id, "name": name, "price": price}

    def update_product(self, product_id, name, price) -> dict:
        validate_product(name, price)
        if self.store.update(product_id, name, price) == 0:
            raise NotFoundError()
        # Echo the id as received rather than re-reading the row
        return {"id": product_id, "name": name, "price": price}

    def delete_product(self, product_id):
        if self.store.delete(product_id) == 0:
            raise NotFoundError()
