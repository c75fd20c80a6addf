"""Integration tests for the catalog use cases."""

from decimal import Decimal

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.browse_catalog import (
    ListCategoriesHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.save_user_contact import SaveUserContactHandler
from storefront.application.seed_products import DEMO_MENU, SeedProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import EntityNotFoundError, ForbiddenError, ValidationError
from storefront.domain.model.requester import Requester, Role
from tests.fakes import FakeProductRepository, FakeUserRepository

ADMIN = Requester("boss", Role.ADMIN)


@pytest.fixture
def repo():
    repo = FakeProductRepository()
    SeedProductsHandler(repo).handle(ADMIN)
    return repo


class TestSeed:

    def test_replaces_catalog_with_demo_menu(self, repo):
        assert len(repo.find()) == len(DEMO_MENU) == 16
        assert repo.get_by_id("1").name == "Margherita Classic"

    def test_reseeding_does_not_duplicate(self, repo):
        SeedProductsHandler(repo).handle(ADMIN)
        assert len(repo.find()) == 16

    def test_staff_cannot_seed(self):
        with pytest.raises(ForbiddenError):
            SeedProductsHandler(FakeProductRepository()).handle(Requester("k", Role.STAFF))


class TestBrowse:

    def test_filter_by_category(self, repo):
        products = ListProductsHandler(repo).handle(category="drink")
        assert products
        assert {p.category for p in products} == {"drink"}

    def test_search_is_case_insensitive(self, repo):
        names = [p.name for p in ListProductsHandler(repo).handle(search="BURGER")]
        assert sorted(names) == [
            "Bacon Deluxe Burger", "Burger Combo Meal", "Classic Cheeseburger", "Veggie Burger",
        ]

    def test_unknown_category_rejected(self, repo):
        with pytest.raises(ValidationError, match="Invalid category"):
            ListProductsHandler(repo).handle(category="salad")

    def test_categories_sorted(self, repo):
        categories = ListCategoriesHandler(repo).handle()
        assert categories == sorted(categories)
        assert "pizza" in categories

    def test_show_missing_product(self, repo):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            ShowProductHandler(repo).handle("404")


class TestAdminEdits:

    def test_add_assigns_next_id(self, repo):
        dto = AddProductHandler(repo).handle(
            ADMIN, name="Garlic Bread", description="Toasted", category="side", price="3.49"
        )
        assert dto.id == "17"
        assert dto.price == Decimal("3.49")

    def test_add_requires_admin(self, repo):
        with pytest.raises(ForbiddenError):
            AddProductHandler(repo).handle(
                Requester("c"), name="X", description="Y", category="side", price="1"
            )

    def test_add_reports_all_errors(self, repo):
        with pytest.raises(ValidationError) as excinfo:
            AddProductHandler(repo).handle(
                ADMIN, name="", description="Toasted", category="side", price="-1"
            )
        assert excinfo.value.errors == ["Please provide a product name", "Price cannot be negative"]

    def test_update(self, repo):
        dto = UpdateProductHandler(repo).handle(ADMIN, "1", price="13.49", available=False)
        assert dto.price == Decimal("13.49")
        assert dto.available is False

    def test_update_missing_product(self, repo):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(repo).handle(ADMIN, "404", price="1")

    def test_delete(self, repo):
        DeleteProductHandler(repo).handle(ADMIN, "1")
        assert repo.get_by_id("1") is None

    def test_delete_missing_product(self, repo):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            DeleteProductHandler(repo).handle(ADMIN, "404")


class TestSaveUserContact:

    def test_email_is_normalised(self):
        users = FakeUserRepository()
        SaveUserContactHandler(users).handle(ADMIN, "alice", "Alice", " Alice@Example.COM ")
        assert users.get_by_id("alice").email == "alice@example.com"

    def test_invalid_email(self):
        with pytest.raises(ValidationError, match="valid email"):
            SaveUserContactHandler(FakeUserRepository()).handle(ADMIN, "alice", "Alice", "nope")

    def test_customer_forbidden(self):
        users = FakeUserRepository()
        with pytest.raises(ForbiddenError):
            SaveUserContactHandler(users).handle(
                Requester("alice"), "alice", "Alice", "alice@example.com"
            )
        assert users.get_by_id("alice") is None
