# -*- coding: utf-8 -*-
"""
Container pools: the untouched heap (by capacity, descending) and the
touched heap (by occupied load, ascending).

A container lives in at most one heap and is only mutated while popped,
so heap keys never go stale.
"""

from __future__ import annotations
import heapq
import itertools
from typing import Dict, List, Tuple

from distributor.business_objects.errors import ConfigurationError
from distributor.heuristics.container_order import by_capacity_desc, by_load_asc
from distributor.planning.state import Container

# (policy key, add order, container); add order is unique so containers are never compared
_Entry = Tuple[Tuple[int], int, Container]


class ContainerPools:
    def __init__(self) -> None:
        self._untouched: List[_Entry] = []
        self._touched: List[_Entry] = []
        self._counter = itertools.count()
        self._add_order: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._untouched) + len(self._touched)

    @property
    def untouched_count(self) -> int:
        return len(self._untouched)

    @property
    def touched_count(self) -> int:
        return len(self._touched)

    def add(self, c: Container) -> None:
        """Register a fresh container in the untouched pool."""
        order = next(self._counter)
        self._add_order[c.id] = order
        heapq.heappush(self._untouched, (by_capacity_desc(c), order, c))

    def release(self, c: Container) -> None:
        """Return a processed container; it is ranked by load from now on."""
        heapq.heappush(self._touched, (by_load_asc(c), self._add_order[c.id], c))

    def next_container(self) -> Container:
        """
        Pop the largest untouched container, or the least loaded touched one
        once every container has been processed.
        """
        if self._untouched:
            return heapq.heappop(self._untouched)[2]
        if self._touched:
            return heapq.heappop(self._touched)[2]
        raise ConfigurationError("No containers available to select from.")
