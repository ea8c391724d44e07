"""
Domain model representing a Category entry of the menu document.
"""
from dataclasses import asdict, dataclass


@dataclass
class Category:
    id: int
    name: str
    description: str

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        """Build a Category from its JSON object."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            description=data.get("description") or "",
        )

    def to_dict(self) -> dict:
        return asdict(self)
