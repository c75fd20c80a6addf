"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, items go on and off the menu, and products are removed
from the catalog. Orders never read a product's live values after
creation; they keep their own snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
DEFAULT_IMAGE = "https://via.placeholder.com/300x300?text=No+Image"

UPDATABLE_FIELDS = frozenset(
    {"name", "description", "category", "price", "image", "available"}
)


class Category(Enum):
    PIZZA = "pizza"
    BURGER = "burger"
    DRINK = "drink"
    DEAL = "deal"
    SIDE = "side"
    DESSERT = "dessert"

    @staticmethod
    def parse(value: str) -> Category:
        try:
            return Category(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(c.value for c in Category)
            raise ValidationError(
                f"Invalid category '{value}' (expected one of: {allowed})"
            ) from None


def validate_product_fields(
    name: Any,
    description: Any,
    category: Any,
    price: Any,
) -> list[str]:
    """Check the raw product fields and return every violated constraint."""
    errors: list[str] = []

    if not isinstance(name, str) or not name.strip():
        errors.append("Please provide a product name")
    elif len(name.strip()) > MAX_NAME_LENGTH:
        errors.append(f"Name cannot be more than {MAX_NAME_LENGTH} characters")

    if not isinstance(description, str) or not description.strip():
        errors.append("Please provide a description")
    elif len(description) > MAX_DESCRIPTION_LENGTH:
        errors.append(
            f"Description cannot be more than {MAX_DESCRIPTION_LENGTH} characters"
        )

    if category is None or category == "":
        errors.append("Please provide a category")
    elif not isinstance(category, Category):
        try:
            Category.parse(category)
        except ValidationError as exc:
            errors.append(str(exc))

    if price is None or price == "":
        errors.append("Please provide a price")
    elif not isinstance(price, Money):
        try:
            Money.of(price)
        except ValidationError:
            if _is_negative(price):
                errors.append("Price cannot be negative")
            else:
                errors.append(f"Invalid price: {price!r}")

    return errors


def _is_negative(raw: Any) -> bool:
    try:
        return float(raw) < 0
    except (TypeError, ValueError):
        return False


@dataclass
class Product:
    """A menu item in the catalog.

    Use ``Product.create()`` for new products; ``__init__`` stays simple so
    repositories can reconstitute stored records without re-validating.
    """

    id: str | None
    name: str
    description: str
    category: Category
    price: Money
    image: str = DEFAULT_IMAGE
    available: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        product_id: str | None,
        name: Any,
        description: Any,
        category: Any,
        price: Any,
        image: str | None = None,
        available: bool = True,
    ) -> Product:
        errors = validate_product_fields(name, description, category, price)
        if errors:
            raise ValidationError("; ".join(errors), errors=errors)

        return Product(
            id=product_id,
            name=name.strip(),
            description=description,
            category=category if isinstance(category, Category) else Category.parse(category),
            price=price if isinstance(price, Money) else Money.of(price),
            image=image or DEFAULT_IMAGE,
            available=bool(available),
        )

    def update(self, **changes: Any) -> None:
        """Apply a partial update, validating the merged result first.

        Nothing is changed if any field is invalid. This does NOT affect
        existing orders because they captured a snapshot at creation time.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot update field(s): {', '.join(sorted(unknown))}"
            )

        merged = {
            "name": changes.get("name", self.name),
            "description": changes.get("description", self.description),
            "category": changes.get("category", self.category),
            "price": changes.get("price", self.price),
        }
        errors = validate_product_fields(**merged)
        if "available" in changes and not isinstance(changes["available"], bool):
            errors.append("Availability must be true or false")
        if errors:
            raise ValidationError("; ".join(errors), errors=errors)

        self.name = merged["name"].strip()
        self.description = merged["description"]
        category = merged["category"]
        self.category = category if isinstance(category, Category) else Category.parse(category)
        price = merged["price"]
        self.price = price if isinstance(price, Money) else Money.of(price)
        if "image" in changes:
            self.image = changes["image"] or DEFAULT_IMAGE
        if "available" in changes:
            self.available = changes["available"]
