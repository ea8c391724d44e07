"""Unit tests for request schemas."""

import pytest
from pydantic import ValidationError

from menu_catalog.schemas.menu_item import MenuItemCreate, MenuItemFilters, MenuItemUpdate


@pytest.mark.unit
class TestMenuItemFilters:
    """Test suite for list filters."""

    def test_blank_values_become_none(self) -> None:
        filters = MenuItemFilters(category_id="", search="", min_price="", max_price="")

        assert filters.model_dump() == {
            "category_id": None,
            "search": None,
            "min_price": None,
            "max_price": None,
        }

    def test_whitespace_search_is_kept(self) -> None:
        """Test that only an empty search is dropped; spaces are a real filter."""
        assert MenuItemFilters(search=" ").search == " "

    def test_string_values_are_parsed(self) -> None:
        filters = MenuItemFilters(category_id="3", min_price="10.5")

        assert filters.category_id == 3
        assert filters.min_price == 10.5

    def test_invalid_number_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MenuItemFilters(max_price="a lot")


@pytest.mark.unit
class TestMenuItemUpdate:
    """Test suite for partial update payloads."""

    def test_provided_fields_only_includes_sent_values(self) -> None:
        update = MenuItemUpdate.model_validate({"price": 0, "description": "", "name": None})

        assert update.provided_fields() == {"price": 0, "description": ""}

    def test_empty_payload_has_no_fields(self) -> None:
        assert MenuItemUpdate().provided_fields() == {}

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MenuItemUpdate(price=-1)

    @pytest.mark.parametrize("name", ["   ", "\t\n"])
    def test_blank_name_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError):
            MenuItemUpdate(name=name)

    def test_name_is_stripped(self) -> None:
        assert MenuItemUpdate(name="  Set Dosa ").provided_fields() == {"name": "Set Dosa"}


@pytest.mark.unit
class TestMenuItemCreate:
    def test_all_fields_optional_at_schema_level(self) -> None:
        data = MenuItemCreate()

        assert data.name is None
        assert data.price is None
        assert data.category_id is None

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MenuItemCreate(name="Idli", price=-1, category_id=2)

    def test_negative_category_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MenuItemCreate(name="Idli", price=50, category_id=-3)
