"""
Products API Routes
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel

from app.service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


class ProductPayload(BaseModel):
    """Schema for create/update bodies. Values are untyped; only presence is checked."""
    name: Optional[Any] = None
    price: Optional[Any] = None


def get_service(request: Request) -> ProductService:
    """Return the service built at startup."""
    return request.app.state.product_service


@router.get("")
def list_products(service: ProductService = Depends(get_service)):
    """
    List all products, one object per row.
    """
    return service.list_products()


@router.post("", status_code=201)
def create_product(
    payload: Optional[ProductPayload] = None,
    service: ProductService = Depends(get_service),
):
    """
    Create a product and return it with its store-assigned id.
    """
    payload = payload or ProductPayload()
    return service.create_product(payload.name, payload.price)


@router.put("/{product_id}")
def update_product(
    product_id: str,
    payload: Optional[ProductPayload] = None,
    service: ProductService = Depends(get_service),
):
    """
    Replace name and price of an existing product.
    The path id is echoed back as received.
    """
    payload = payload or ProductPayload()
    return service.update_product(product_id, payload.name, payload.price)


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: str, service: ProductService = Depends(get_service)):
    """
    Delete a product by id. Responds 204 with an empty body.
    """
    service.delete_product(product_id)
    return Response(status_code=204)
