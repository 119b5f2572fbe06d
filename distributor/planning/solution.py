# -*- coding: utf-8 -*-
"""
Solution and attempt models for distribution results.

These data classes define the shape of outputs produced by the pairing
solver and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class AttemptRecord:
    """
    Outcome of one insertion attempt.

    Attributes
    ----------
    step : int
        Zero-based attempt index within the run.
    item_id : str
        The item tried.
    container_id : str
        The container it was tried against.
    size : int
        Item size.
    placed : bool
        Whether the insertion succeeded.
    phase : str
        Solver phase that made the attempt ("attempting_pair", "retrying_smallest", ...).
    """
    step: int
    item_id: str
    container_id: str
    size: int
    placed: bool
    phase: str


@dataclass(frozen=True)
class Solution:
    """
    Aggregated results for a full run.

    Attributes
    ----------
    assignments : dict[item_id, container_id | None]
        Every input item exactly once, in the order it was first recorded.
        None means not placed.
    occupied : dict[container_id, int]
        Post-run load per container.
    mean : float | None
        Fixed mean used by the retry rule (None when there were no items).
    attempts : tuple[AttemptRecord, ...]
        Every insertion attempt, in order.
    """
    assignments: Dict[str, Optional[str]]
    occupied: Dict[str, int]
    mean: Optional[float] = None
    attempts: Tuple[AttemptRecord, ...] = field(default=())

    def assigned(self) -> Dict[str, str]:
        return {iid: cid for iid, cid in self.assignments.items() if cid is not None}

    def unassigned(self) -> List[str]:
        return [iid for iid, cid in self.assignments.items() if cid is None]
