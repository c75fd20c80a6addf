"""Application service: Seed Products use case.

Replaces the whole catalog with the demo menu. Intended for fresh
installations and demos; existing orders are untouched.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.product_view import to_product_dto
from storefront.domain.model.product import Product
from storefront.domain.model.requester import Requester, Role
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.authorization import require_role

logger = structlog.get_logger(__name__)

_IMG = "https://images.unsplash.com/photo-{}?w=400"

# (name, description, category, price, image id)
DEMO_MENU: list[tuple[str, str, str, str, str]] = [
    ("Margherita Classic", "Classic Italian pizza with fresh mozzarella, tomatoes, and basil",
     "pizza", "12.99", "1574071318508-1cdbab80d002"),
    ("Pepperoni Feast", "Loaded with pepperoni slices and melted cheese",
     "pizza", "14.99", "1628840042765-356cda07504e"),
    ("BBQ Chicken Pizza", "Grilled chicken with BBQ sauce and onions",
     "pizza", "16.99", "1593560708920-61dd98c46a4e"),
    ("Veggie Supreme", "Loaded with fresh vegetables - peppers, mushrooms, olives, onions",
     "pizza", "13.99", "1511689660979-10d2b1aada49"),
    ("Classic Cheeseburger", "Juicy beef patty with cheddar cheese, lettuce, tomato, and special sauce",
     "burger", "9.99", "1568901346375-23c9450c58cd"),
    ("Bacon Deluxe Burger", "Double beef patty with crispy bacon and cheese",
     "burger", "12.99", "1553979459-d2229ba7433b"),
    ("Veggie Burger", "Plant-based patty with fresh vegetables and vegan mayo",
     "burger", "10.99", "1520072959219-c595dc870360"),
    ("Coca Cola", "330ml can",
     "drink", "1.99", "1581636625402-29b2a704ef13"),
    ("Fresh Orange Juice", "500ml freshly squeezed orange juice",
     "drink", "3.49", "1546173159-315724a31696"),
    ("Iced Tea", "500ml refreshing iced tea",
     "drink", "2.49", "1556679343-c7306c1976bc"),
    ("Family Pizza Deal", "2 Large pizzas, 1.5L drink, and garlic bread",
     "deal", "39.99", "1594007654729-407eedc4be65"),
    ("Burger Combo Meal", "Burger, fries, and drink",
     "deal", "14.99", "1594212699903-ec8a3eca50f5"),
    ("Garlic Bread", "Crispy bread with garlic butter and herbs",
     "side", "4.99", "1619535860434-ba1d8fa12536"),
    ("Loaded Fries", "Fries with cheese, bacon, and sour cream",
     "side", "6.99", "1630384060421-cb20d0e0649d"),
    ("Chocolate Lava Cake", "Warm chocolate cake with molten center",
     "dessert", "5.99", "1624353365286-3f8d62daad51"),
    ("Ice Cream Sundae", "Vanilla ice cream with chocolate sauce and cherry",
     "dessert", "4.49", "1572490122747-3968b75cc699"),
]


class SeedProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, requester: Requester) -> list[ProductDTO]:
        require_role(requester, {Role.ADMIN})

        products = [
            Product.create(
                product_id=str(index),
                name=name,
                description=description,
                category=category,
                price=price,
                image=_IMG.format(image_id),
            )
            for index, (name, description, category, price, image_id) in enumerate(
                DEMO_MENU, start=1
            )
        ]
        self._product_repo.replace_all(products)

        logger.info("Catalog seeded", product_count=len(products))
        return [to_product_dto(p) for p in products]
