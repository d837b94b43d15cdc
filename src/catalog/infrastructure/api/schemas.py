"""Request and response bodies for the products API."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from catalog.domain.model.product import Product
from catalog.domain.service.validation import (
    DESCRIPTION_LENGTH,
    ID_LENGTH,
    NAME_LENGTH,
)


class ProductSchema(BaseModel):
    id: str
    name: str
    description: str
    logo: str
    date_release: date
    date_revision: date

    def to_domain(self) -> Product:
        return Product(**self.model_dump())

    @staticmethod
    def from_domain(product: Product) -> ProductSchema:
        return ProductSchema(**product.to_dict())


class NewProductSchema(ProductSchema):
    """POST body: field lengths are checked before the product reaches the store."""

    id: str = Field(min_length=ID_LENGTH[0], max_length=ID_LENGTH[1])
    name: str = Field(min_length=NAME_LENGTH[0], max_length=NAME_LENGTH[1])
    description: str = Field(
        min_length=DESCRIPTION_LENGTH[0], max_length=DESCRIPTION_LENGTH[1]
    )
    logo: str = Field(min_length=1)


class ProductPatchSchema(BaseModel):
    """PUT body: any subset of the product fields."""

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    logo: Optional[str] = None
    date_release: Optional[date] = None
    date_revision: Optional[date] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ProductListResponse(BaseModel):
    data: list[ProductSchema]


class ProductMessageResponse(BaseModel):
    message: str
    data: ProductSchema


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    name: str
    message: str
