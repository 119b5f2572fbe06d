# -*- coding: utf-8 -*-
"""
Planning layer public API for the distribution pipeline.

This module exposes the core planning-time data contracts:
  - State models (SelectionState, RuntimeState, Container)
  - Policy configuration
  - Solution and AttemptRecord models

The solver, pools, tracker and Allocator facade are not exported here to
avoid import cycles with the heuristics layer. Import them explicitly.
"""

from .state import SelectionState, RuntimeState, Container
from .policy import Policy
from .solution import AttemptRecord, Solution

__all__ = [
    "SelectionState",
    "RuntimeState",
    "Container",
    "Policy",
    "AttemptRecord",
    "Solution",
]
