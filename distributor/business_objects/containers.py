# -*- coding: utf-8 -*-
"""
Container template model.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class ContainerSpec:
    """
    Immutable container (node) template.

    Attributes
    ----------
    id : str
        Unique identifier (node name).
    capacity : int
        Nonnegative capacity limit.
    """
    id: str
    capacity: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.id:
            raise StateValidationError("ContainerSpec.id must be non-empty.")
        if self.capacity < 0:
            raise StateValidationError(f"ContainerSpec[{self.id}] capacity must be >= 0.")
