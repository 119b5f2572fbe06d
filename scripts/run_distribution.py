#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the pairing distribution on a files/nodes pair and export run artifacts.

This version does NOT use argparse (see `distribute` for the CLI).
Just set the variables at the top of the file and run:

    python scripts/run_distribution.py

Outputs under OUT_DIR:
  - attempt_log.csv     (every insertion attempt, in order)
  - assignments.csv     (final per-file assignment)
  - per_container.csv   (per-node KPIs)
  - summary.csv         (global KPIs)
"""

from __future__ import annotations
import os

# ====== CONFIGURATION ======
FILES_PATH = "data/files.txt"
NODES_PATH = "data/nodes.txt"
OUT_DIR = "reports/example"

# "NULL" reproduces the legacy output format
UNASSIGNED_LABEL = "NULL"
INTEGER_MEAN = True
VERBOSE = 1
# ===========================

from distributor.planning.allocator import Allocator
from distributor.planning.policy import Policy
from distributor.planning.tracker import Tracker
from distributor.utils.logs import init_logger
from distributor.utils.read_records import read_containers_txt, read_items_txt
from distributor.utils.write_results import write_assignments


def main() -> None:
    init_logger(VERBOSE, "distributor")

    policy = Policy(integer_mean=INTEGER_MEAN, unassigned_label=UNASSIGNED_LABEL)
    allocator = Allocator(policy=policy, tracker=Tracker(out_dir=OUT_DIR))

    for item in read_items_txt(FILES_PATH):
        allocator.add_item(item.id, item.size)
    for spec in read_containers_txt(NODES_PATH):
        allocator.add_container(spec.id, spec.capacity)

    matchings = allocator.allocate()

    print("\n=== Matchings ===")
    write_assignments(matchings, unassigned_label=policy.unassigned_label)

    print("\n=== Node loads ===")
    for c in allocator.containers:
        print(f"  - {c.id}: {c.occupied}/{c.capacity}")

    print(f"\nArtifacts written to: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
