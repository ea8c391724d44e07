"""
Domain model for the whole persisted menu document.
"""
from dataclasses import dataclass, field

from menu_catalog.models.category import Category
from menu_catalog.models.menu_item import MenuItem


@dataclass
class MenuDocument:
    """Categories and items in their stored order."""

    categories: list[Category] = field(default_factory=list)
    items: list[MenuItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "MenuDocument":
        return cls(
            categories=[Category.from_dict(c) for c in data.get("categories", [])],
            items=[MenuItem.from_dict(i) for i in data.get("items", [])],
        )

    def to_dict(self) -> dict:
        return {
            "categories": [c.to_dict() for c in self.categories],
            "items": [i.to_dict() for i in self.items],
        }
