"""Builds the outward view of an order.

Every order use case returns its result through ``OrderViewBuilder`` so the
caller always sees freshly resolved display fields (the owner's contact
details, each product's current name and image) next to the frozen
snapshot stored on the order.
"""

from __future__ import annotations

from storefront.application.dto import (
    OrderDTO,
    OrderLineItemDTO,
    ProductSummaryDTO,
    UserContactDTO,
)
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class OrderViewBuilder:

    def __init__(
        self,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._product_repo = product_repo
        self._user_repo = user_repo

    def build(self, order: Order) -> OrderDTO:
        products: dict[str, Product | None] = {}
        for item in order.items:
            if item.product_id not in products:
                products[item.product_id] = self._product_repo.get_by_id(item.product_id)

        contact = self._user_repo.get_by_id(order.user_id)

        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,
                    name=item.product_name,
                    price=item.unit_price.amount,
                    quantity=item.quantity.value,
                    line_total=item.line_total.amount,
                    product=self._summary(products[item.product_id]),
                )
                for item in order.items
            ],
            total_amount=order.total_amount.amount,
            payment_method=order.payment_method,
            payment_status=order.payment_status.value,
            delivery_address=order.delivery_address,
            notes=order.notes,
            status=order.status.value,
            created_at=order.created_at.isoformat(),
            updated_at=order.updated_at.isoformat(),
            user=(
                UserContactDTO(
                    id=contact.user_id,
                    name=contact.name,
                    email=contact.email,
                    phone=contact.phone,
                )
                if contact is not None
                else None
            ),
        )

    def build_many(self, orders: list[Order]) -> list[OrderDTO]:
        return [self.build(order) for order in orders]

    @staticmethod
    def _summary(product: Product | None) -> ProductSummaryDTO | None:
        # Deleted products keep their snapshot but lose the live display fields.
        if product is None:
            return None
        return ProductSummaryDTO(
            name=product.name,
            description=product.description,
            image=product.image,
            price=product.price.amount,
        )
