# -*- coding: utf-8 -*-
"""
Run-time state containers for the distribution pipeline.

This module defines:
  - Container:      mutable node used during a run
  - SelectionState: immutable input snapshot (items + container specs)
  - RuntimeState:   mutable working state created from SelectionState

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
  * business_objects.containers.ContainerSpec
- Planning/runtime entities (below) are specific to executing a run.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List

from distributor.business_objects.errors import StateValidationError
from distributor.business_objects.items import Item
from distributor.business_objects.containers import ContainerSpec


# ----------------------------
# Runtime (mutable) container
# ----------------------------

@dataclass
class Container:
    """
    Mutable container used during planning.

    Attributes
    ----------
    id : str
        Identifier (must match its ContainerSpec).
    capacity : int
        Capacity limit (copied from spec).
    occupied : int
        Total size of the items placed so far; never decreases.
    touched : bool
        False until the first successful insertion.
    items : list[str]
        Ids of the placed items, in insertion order.
    """
    id: str
    capacity: int
    occupied: int = field(default=0, init=False)
    touched: bool = field(default=False, init=False)
    items: List[str] = field(default_factory=list, init=False)

    @classmethod
    def from_spec(cls, spec: ContainerSpec) -> "Container":
        return cls(id=spec.id, capacity=spec.capacity)

    @property
    def remaining(self) -> int:
        return self.capacity - self.occupied

    def try_insert(self, item: Item) -> bool:
        """
        Attempt to place the item. Returns True if committed, False otherwise.
        A failed attempt leaves the container untouched.
        """
        if self.occupied + item.size > self.capacity:
            return False
        self.occupied += item.size
        self.items.append(item.id)
        self.touched = True
        return True


# ----------------------------
# Immutable input snapshot
# ----------------------------

@dataclass(frozen=True)
class SelectionState:
    """
    Immutable problem input for a distribution run.

    Attributes
    ----------
    items : list[Item]
        All files to distribute, in input order.
    containers : list[ContainerSpec]
        Node templates (id + capacity), in input order.
    """
    items: List[Item]
    containers: List[ContainerSpec]

    def __post_init__(self) -> None:  # type: ignore[override]
        seen_items: set[str] = set()
        for it in self.items:
            if it.id in seen_items:
                raise StateValidationError(f"Duplicate Item.id: {it.id}")
            seen_items.add(it.id)

        seen_containers: set[str] = set()
        for cs in self.containers:
            if cs.id in seen_containers:
                raise StateValidationError(f"Duplicate ContainerSpec.id: {cs.id}")
            seen_containers.add(cs.id)

    @property
    def total_size(self) -> int:
        return sum(it.size for it in self.items)

    def to_runtime(self) -> "RuntimeState":
        """
        Create a fresh, mutable RuntimeState to execute a run.
        Items are immutable, so we share references safely.
        """
        return RuntimeState(
            items=list(self.items),
            containers=[Container.from_spec(cs) for cs in self.containers],
        )


# ----------------------------
# Mutable working state
# ----------------------------

@dataclass
class RuntimeState:
    """
    Mutable state used during the run.

    Attributes
    ----------
    items : list[Item]
        Treat as read-only; the solver consumes its own sorted copy.
    containers : list[Container]
        Mutable nodes with occupied load.
    """
    items: List[Item]
    containers: List[Container]

    def by_container_id(self) -> Dict[str, Container]:
        """Convenience lookup table by container id."""
        return {c.id: c for c in self.containers}
