# -*- coding: utf-8 -*-
"""
quality_metrics/balance.py

Pure helpers to compute load-balance KPIs for a distribution run.
- No side effects
- Works off SelectionState and Solution

Public API:
  - per_container_metrics(state, solution) -> List[Dict]
  - compute_global_metrics(state, solution) -> Dict[str, float]
"""

from __future__ import annotations
import math
from typing import Any, Dict, List

from distributor.planning.solution import Solution
from distributor.planning.state import SelectionState


def _pct(part: float, whole: float) -> float:
    return 0.0 if whole == 0 else (part / whole) * 100.0


# ---------------------------------------------------------------------------
# 1) Per-container rows
# ---------------------------------------------------------------------------
def per_container_metrics(state: SelectionState, solution: Solution) -> List[Dict[str, Any]]:
    """
    One row per container, in input order:
      container_id, capacity, occupied, remaining, utilization_pct, items_placed
    """
    count_by_container: Dict[str, int] = {cs.id: 0 for cs in state.containers}
    for cid in solution.assignments.values():
        if cid is not None:
            count_by_container[cid] += 1

    rows: List[Dict[str, Any]] = []
    for cs in state.containers:
        occ = int(solution.occupied.get(cs.id, 0))
        rows.append({
            "container_id": cs.id,
            "capacity": cs.capacity,
            "occupied": occ,
            "remaining": cs.capacity - occ,
            "utilization_pct": round(_pct(occ, cs.capacity), 4),
            "items_placed": count_by_container[cs.id],
        })
    return rows


# ---------------------------------------------------------------------------
# 2) Global metrics
# ---------------------------------------------------------------------------
def compute_global_metrics(state: SelectionState, solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "total_items", "assigned_items", "unassigned_items",
        "total_size", "assigned_size", "unassigned_size",
        "num_containers", "capacity_sum",
        "utilization_pct",   # assigned_size / capacity_sum (0..100)
        "load_spread",       # max occupied - min occupied
        "load_std",          # population std-dev of occupied loads
        "mean",              # fixed mean used by the retry rule (0 if none)
      }
    """
    size_by_id = {it.id: it.size for it in state.items}
    assigned_ids = [iid for iid, cid in solution.assignments.items() if cid is not None]
    assigned_size = sum(size_by_id[iid] for iid in assigned_ids)
    total_size = sum(size_by_id.values())
    capacity_sum = sum(cs.capacity for cs in state.containers)

    loads = [float(solution.occupied.get(cs.id, 0)) for cs in state.containers]
    if loads:
        mean_load = sum(loads) / len(loads)
        load_std = math.sqrt(sum((x - mean_load) ** 2 for x in loads) / len(loads))
        load_spread = max(loads) - min(loads)
    else:
        load_std = 0.0
        load_spread = 0.0

    return {
        "total_items": float(len(state.items)),
        "assigned_items": float(len(assigned_ids)),
        "unassigned_items": float(len(state.items) - len(assigned_ids)),
        "total_size": float(total_size),
        "assigned_size": float(assigned_size),
        "unassigned_size": float(total_size - assigned_size),
        "num_containers": float(len(state.containers)),
        "capacity_sum": float(capacity_sum),
        "utilization_pct": float(_pct(assigned_size, capacity_sum)),
        "load_spread": float(load_spread),
        "load_std": float(load_std),
        "mean": float(solution.mean or 0.0),
    }
