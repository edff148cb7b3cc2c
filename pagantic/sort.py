"""
Sort descriptors carried by a page request.

The wire shape is a JSON array of orders:

    [{"property": "createdAt", "direction": "DESC"}, {"property": "id", "direction": "ASC"}]

An absent or empty array means the content is unsorted.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel, field_validator


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class Order(BaseModel):
    """
    A single (property, direction) pair.

    Servers often emit extra keys alongside these two (ignoreCase, nullHandling, ...);
    they are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    property: str
    direction: Direction = Direction.ASC

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, value: Any) -> Any:
        # "desc" and "Desc" are as valid as "DESC" on the wire
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def is_ascending(self) -> bool:
        return self.direction is Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self.direction is Direction.DESC

    def __str__(self) -> str:
        return f"{self.property}: {self.direction.value}"


class Sort(RootModel[tuple[Order, ...]]):
    """Ordered list of Orders. Order matters: the first entry is the primary sort key."""

    model_config = ConfigDict(frozen=True)

    root: tuple[Order, ...] = ()

    @classmethod
    def by(cls, *properties: str, direction: Direction = Direction.ASC) -> "Sort":
        """
        Builds a Sort over the given properties, all in the same direction.

        Usage:
            Sort.by("last_name", "first_name")
            Sort.by("created_at", direction=Direction.DESC)
        """
        return cls(tuple(Order(property=p, direction=direction) for p in properties))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls(())

    @property
    def is_sorted(self) -> bool:
        return len(self.root) > 0

    @property
    def is_unsorted(self) -> bool:
        return not self.is_sorted

    def and_(self, other: "Sort") -> "Sort":
        """Returns a new Sort with the orders of `other` appended to this one."""
        return Sort(self.root + other.root)

    def get_order_for(self, property_name: str) -> Order | None:
        for order in self.root:
            if order.property == property_name:
                return order
        return None

    def __iter__(self) -> Iterator[Order]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __bool__(self) -> bool:
        return self.is_sorted

    def __str__(self) -> str:
        if not self.root:
            return "UNSORTED"
        return ", ".join(str(order) for order in self.root)
