"""HTTP routes for the Product aggregate.

Handlers are plain ``def`` so FastAPI runs them in its threadpool; the
repository serializes each operation itself.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.api.schemas import (
    ErrorResponse,
    MessageResponse,
    ProductListResponse,
    ProductMessageResponse,
    ProductPatchSchema,
    NewProductSchema,
    ProductSchema,
)

router = APIRouter(prefix="/products", tags=["Products"])

_errors = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def get_repository(request: Request) -> ProductRepository:
    return request.app.state.repository


@router.get("", response_model=ProductListResponse)
def list_products(repo: ProductRepository = Depends(get_repository)):
    return {"data": [ProductSchema.from_domain(p) for p in repo.list_all()]}


@router.get("/verification/{product_id}", response_model=bool)
def verify_identifier(product_id: str, repo: ProductRepository = Depends(get_repository)):
    return repo.exists(product_id)


@router.get("/{product_id}", response_model=ProductSchema, responses=_errors)
def get_product(product_id: str, repo: ProductRepository = Depends(get_repository)):
    return ProductSchema.from_domain(repo.get_by_id(product_id))


@router.post("", response_model=ProductMessageResponse, responses=_errors)
def create_product(body: NewProductSchema, repo: ProductRepository = Depends(get_repository)):
    product = repo.create(body.to_domain())
    return {
        "message": "Product added successfully",
        "data": ProductSchema.from_domain(product),
    }


@router.put("/{product_id}", response_model=ProductMessageResponse, responses=_errors)
def update_product(
    product_id: str,
    body: ProductPatchSchema,
    repo: ProductRepository = Depends(get_repository),
):
    product = repo.update(product_id, body.changes())
    return {
        "message": "Product updated successfully",
        "data": ProductSchema.from_domain(product),
    }


@router.delete("/{product_id}", response_model=MessageResponse, responses=_errors)
def delete_product(product_id: str, repo: ProductRepository = Depends(get_repository)):
    repo.delete(product_id)
    return {"message": "Product removed successfully"}
