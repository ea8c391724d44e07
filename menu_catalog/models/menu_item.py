"""
Domain model representing a MenuItem entry of the menu document.
"""
from dataclasses import asdict, dataclass


@dataclass
class MenuItem:
    id: int
    name: str
    price: float
    description: str
    category_id: int

    @classmethod
    def from_dict(cls, data: dict) -> "MenuItem":
        """Build a MenuItem from its JSON object."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            price=data["price"],
            description=data.get("description") or "",
            category_id=int(data["category_id"]),
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def matches_search(self, term: str) -> bool:
        """Return True when *term* occurs in the name or description, ignoring case."""
        needle = term.lower()
        return needle in self.name.lower() or needle in self.description.lower()
