"""Mapping from the Product aggregate to its outward DTO."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        category=product.category.value,
        price=product.price.amount,
        image=product.image,
        available=product.available,
        created_at=product.created_at.isoformat(),
    )
