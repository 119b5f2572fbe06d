# -*- coding: utf-8 -*-
"""
Item model: a file to be placed on at most one container.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    A file that can be assigned to at most one container.

    Items order by size only (<, <=, >, >=); two items of equal size compare
    as neither less nor greater, so a stable sort keeps their input order.
    Equality stays the dataclass one (id and size).

    Attributes
    ----------
    id : str
        Unique identifier (file name).
    size : int
        Nonnegative size (capacity consumption).
    """
    id: str
    size: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.id:
            raise StateValidationError("Item.id must be non-empty.")
        if self.size < 0:
            raise StateValidationError(f"Item[{self.id}] size must be >= 0.")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.size < other.size

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.size <= other.size

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.size > other.size

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.size >= other.size
