# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for a distribution run.

Files produced (when Tracker is used):
  - attempt_log.csv     (append-as-you-go, one row per insertion attempt)
  - assignments.csv     (final per-item assignment snapshot)
  - per_container.csv   (per-container KPIs)
  - summary.csv         (global KPIs)

Callers decide when to invoke the final writers; the Allocator calls them
after the solver returns.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass, field

from distributor.planning.solution import AttemptRecord, Solution
from distributor.planning.state import SelectionState
from distributor.quality_metrics.balance import compute_global_metrics, per_container_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str
    _attempt_log_path: str = field(init=False, repr=False)
    _attempts_started: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)
        self._attempt_log_path = os.path.join(self.out_dir, "attempt_log.csv")

    @property
    def attempt_log_path(self) -> str:
        return self._attempt_log_path

    # -----------------------------
    # Attempt log CSV
    # -----------------------------
    def append_attempt(self, record: AttemptRecord, occupied_after: int) -> str:
        """
        Append a single attempt row.

        Columns:
          step_index, item_id, container_id, size, placed (0/1), phase, occupied_after
        """
        mode = "a" if self._attempts_started else "w"
        with open(self._attempt_log_path, mode, newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            if not self._attempts_started:
                w.writerow([
                    "step_index",
                    "item_id",
                    "container_id",
                    "size",
                    "placed",
                    "phase",
                    "occupied_after",
                ])
                self._attempts_started = True
            w.writerow([
                record.step,
                record.item_id,
                record.container_id,
                record.size,
                1 if record.placed else 0,
                record.phase,
                occupied_after,
            ])
        return self._attempt_log_path

    # -----------------------------
    # Final artifacts after solve
    # -----------------------------
    def write_assignments_csv(
        self,
        state: SelectionState,
        solution: Solution,
        filename: str = "assignments.csv",
    ) -> str:
        """
        Final per-item assignment snapshot.

        Columns:
          item_id, container_id, size, placed (0/1)
        """
        path = os.path.join(self.out_dir, filename)
        size_by_id = {it.id: it.size for it in state.items}

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["item_id", "container_id", "size", "placed"])
            for iid, cid in solution.assignments.items():
                w.writerow([
                    iid,
                    "" if cid is None else cid,
                    size_by_id[iid],
                    0 if cid is None else 1,
                ])
        return path

    def write_per_container_csv(
        self,
        state: SelectionState,
        solution: Solution,
        filename: str = "per_container.csv",
    ) -> str:
        """
        Per-container KPIs.

        Columns:
          container_id, capacity, occupied, remaining, utilization_pct, items_placed
        """
        path = os.path.join(self.out_dir, filename)
        rows = per_container_metrics(state, solution)
        columns = ["container_id", "capacity", "occupied", "remaining", "utilization_pct", "items_placed"]

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=columns)
            w.writeheader()
            w.writerows(rows)
        return path

    def write_summary_csv(
        self,
        state: SelectionState,
        solution: Solution,
        filename: str = "summary.csv",
    ) -> str:
        """Global KPIs as a single-row CSV (see quality_metrics.balance)."""
        path = os.path.join(self.out_dir, filename)
        metrics = compute_global_metrics(state, solution)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(list(metrics.keys()))
            w.writerow(list(metrics.values()))
        return path
