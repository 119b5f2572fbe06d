# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the distribution pipeline.

  - integer_mean: bool
    Floor the mean item load per container (total // containers) instead of
    keeping the exact ratio. The mean is only used to pick the retry end
    after a rejected pair.
  - unassigned_label: str
    Token written in place of a container id for items that were not placed.
    Must be a single whitespace-free word so output lines stay two-column.
"""

from __future__ import annotations
from dataclasses import dataclass

from distributor.business_objects.errors import ConfigurationError

DEFAULT_UNASSIGNED_LABEL = "unassigned"


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    integer_mean : bool
        Floor division for the fixed mean (default True).
    unassigned_label : str
        Output token for unplaced items (e.g. "NULL").
    """
    integer_mean: bool = True
    unassigned_label: str = DEFAULT_UNASSIGNED_LABEL

    def __post_init__(self) -> None:  # type: ignore[override]
        label = self.unassigned_label
        if not label or any(ch.isspace() for ch in label):
            raise ConfigurationError(
                f"unassigned_label must be a non-empty word without whitespace, got {label!r}."
            )
