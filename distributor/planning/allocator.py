# -*- coding: utf-8 -*-
"""
Allocator: the population/execution facade around the pairing solver.

    alloc = Allocator()
    alloc.add_item("tom.dat", 1024)
    alloc.add_container("node1", 2048)
    matchings = alloc.allocate()

An Allocator serves a single run. allocate() consumes the item collection;
calling it again returns an empty mapping.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional

from distributor.business_objects.containers import ContainerSpec
from distributor.business_objects.items import Item
from distributor.planning.policy import Policy
from distributor.planning.solution import Solution
from distributor.planning.solvers.pairing import run_pairing
from distributor.planning.state import Container, SelectionState
from distributor.planning.tracker import Tracker

logger = logging.getLogger(__name__)


class Allocator:
    """
    Collects files and nodes, then distributes them in one pass.

    Attributes
    ----------
    total_size : int
        Running total of all added item sizes.
    num_containers : int
        Number of containers added.
    solution : Solution | None
        Result of the last allocate() call.
    containers : list[Container]
        Runtime containers of the last run (empty before allocate()).
    """

    def __init__(self, policy: Optional[Policy] = None, tracker: Optional[Tracker] = None) -> None:
        self.policy = policy or Policy()
        self.tracker = tracker
        self.total_size = 0
        self.num_containers = 0
        self.solution: Optional[Solution] = None
        self.containers: List[Container] = []
        self._items: List[Item] = []
        self._specs: List[ContainerSpec] = []

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, name: str, size: int) -> None:
        self._items.append(Item(id=name, size=size))
        self.total_size += size

    def add_container(self, name: str, capacity: int) -> None:
        self._specs.append(ContainerSpec(id=name, capacity=capacity))
        self.num_containers += 1

    def allocate(self) -> Dict[str, Optional[str]]:
        """
        Distribute every added item and return item id -> container id
        (None for unassigned items).

        Raises ConfigurationError when items exist but no container was added;
        the item collection is left intact in that case. Once a run has
        consumed the items, further calls return {} and leave the previous
        results (containers, solution, tracker artifacts) as they are.
        """
        if not self._items and self.solution is not None:
            return {}

        state = SelectionState(items=list(self._items), containers=list(self._specs))
        runtime = state.to_runtime()
        solution = run_pairing(runtime, policy=self.policy, tracker=self.tracker)

        self._items.clear()
        self.containers = runtime.containers
        self.solution = solution

        if self.tracker is not None:
            self.tracker.write_assignments_csv(state, solution)
            self.tracker.write_per_container_csv(state, solution)
            self.tracker.write_summary_csv(state, solution)

        placed = len(solution.assigned())
        logger.info(
            "Distributed %d/%d item(s) over %d container(s); %d unassigned",
            placed, len(solution.assignments), self.num_containers, len(solution.assignments) - placed,
        )
        return dict(solution.assignments)
