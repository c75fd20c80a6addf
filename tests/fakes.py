"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import Category, Product
from storefront.domain.model.user_contact import UserContact
from storefront.domain.model.value_objects import DateRange
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        for order in orders or []:
            self.save(order)

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def find(
        self,
        user_id: str | None = None,
        status: OrderStatus | None = None,
        date_range: DateRange | None = None,
    ) -> list[Order]:
        matches = [
            o
            for o in self._store.values()
            if (user_id is None or o.user_id == user_id)
            and (status is None or o.status == status)
            and (date_range is None or date_range.contains(o.created_at))
        ]
        return sorted(matches, key=lambda o: (o.created_at, o.id), reverse=True)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
        self._next_id = max(self._next_id, order.id + 1)
        self._store[order.id] = order


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        if not self._store:
            return "1"
        return str(max(int(pid) for pid in self._store) + 1)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def find(
        self,
        category: Category | None = None,
        search: str | None = None,
        available: bool | None = None,
    ) -> list[Product]:
        matches = [
            p
            for p in self._store.values()
            if (category is None or p.category == category)
            and (search is None or search.lower() in p.name.lower())
            and (available is None or p.available == available)
        ]
        return sorted(matches, key=lambda p: p.created_at, reverse=True)

    def distinct_categories(self) -> list[Category]:
        return list(dict.fromkeys(p.category for p in self._store.values()))

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)

    def replace_all(self, products: list[Product]) -> None:
        self._store = {p.id: p for p in products}


class FakeUserRepository(UserRepository):

    def __init__(self, contacts: list[UserContact] | None = None) -> None:
        self._store: dict[str, UserContact] = {}
        for c in contacts or []:
            self._store[c.user_id] = c

    def get_by_id(self, user_id: str) -> UserContact | None:
        return self._store.get(user_id)

    def save(self, contact: UserContact) -> None:
        self._store[contact.user_id] = contact
