# -*- coding: utf-8 -*-
"""
Output helpers: one `<item-id> <container-id>` line per item, in mapping order.
Unassigned items carry the policy's unassigned label instead of a container id.
"""

from __future__ import annotations
import sys
from typing import Dict, List, Optional

from distributor.planning.policy import DEFAULT_UNASSIGNED_LABEL


def format_assignments(
    assignments: Dict[str, Optional[str]],
    unassigned_label: str = DEFAULT_UNASSIGNED_LABEL,
) -> List[str]:
    return [
        f"{iid} {unassigned_label if cid is None else cid}"
        for iid, cid in assignments.items()
    ]


def write_assignments(
    assignments: Dict[str, Optional[str]],
    out: Optional[str] = None,
    unassigned_label: str = DEFAULT_UNASSIGNED_LABEL,
) -> None:
    """
    Write the matchings to `out`, or to standard output when `out` is None.
    """
    lines = format_assignments(assignments, unassigned_label)
    if out is None:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
        return

    with open(out, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
