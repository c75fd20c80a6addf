"""Unit tests for role and ownership checks."""

import pytest

from storefront.domain.exceptions import ForbiddenError, ValidationError
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.requester import Requester, Role
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.authorization import (
    STAFF_ROLES,
    can_access_order,
    has_role,
    require_role,
)


def _order_for(user_id: str) -> Order:
    item = OrderLineItem("1", "Margherita", Money.of("12.99"), Quantity(1))
    return Order.create(user_id, [item], "card", "12 High Street")


class TestRoles:

    def test_has_role(self):
        assert has_role(Requester("a", Role.ADMIN), STAFF_ROLES)
        assert not has_role(Requester("c"), STAFF_ROLES)

    def test_require_role_message_names_the_role(self):
        with pytest.raises(
            ForbiddenError,
            match="User role 'customer' is not authorized to access this route",
        ):
            require_role(Requester("c"), {Role.ADMIN})

    def test_require_role_passes_silently(self):
        require_role(Requester("s", Role.STAFF), STAFF_ROLES)

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError, match="Unknown role"):
            Role.parse("manager")

    def test_requester_needs_an_id(self):
        with pytest.raises(ValidationError):
            Requester(" ")


class TestOrderAccess:

    def test_owner_can_access(self):
        assert can_access_order(Requester("u1"), _order_for("u1"))

    def test_other_customer_cannot_access(self):
        assert not can_access_order(Requester("u2"), _order_for("u1"))

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.STAFF])
    def test_staff_roles_access_every_order(self, role):
        assert can_access_order(Requester("someone", role), _order_for("u1"))
