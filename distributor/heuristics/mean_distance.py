# -*- coding: utf-8 -*-
"""
Mean-distance rule used to pick the retry end after a rejected pair.

The mean is fixed once per run (total item size / number of containers at
the start) and is never recomputed as items are consumed.

Public entry points:
    fixed_mean(total_size, num_containers, integer=True) -> float
    dist_to_mean(item, mean) -> float
    choose_retry_end(items, mean) -> End | None
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, Sequence

from distributor.business_objects.errors import ConfigurationError
from distributor.business_objects.items import Item


class End(Enum):
    """Which end of the ascending item sequence to draw from."""
    SMALLEST = "smallest"
    LARGEST = "largest"


def fixed_mean(total_size: int, num_containers: int, integer: bool = True) -> float:
    """
    Mean item load per container.

    integer=True floors the quotient (whole-unit sizes); integer=False keeps
    the exact ratio.
    """
    if num_containers <= 0:
        raise ConfigurationError("Mean load is undefined without containers.")
    if integer:
        return float(total_size // num_containers)
    return total_size / num_containers


def dist_to_mean(item: Item, mean: float) -> float:
    return abs(item.size - mean)


def choose_retry_end(items: Sequence[Item], mean: float) -> Optional[End]:
    """
    Compare the current smallest and largest remaining items and return the
    end whose item lies farther from the mean. An exact tie goes to the
    smallest end. Returns None when nothing is left to retry.
    """
    if not items:
        return None
    if dist_to_mean(items[0], mean) >= dist_to_mean(items[-1], mean):
        return End.SMALLEST
    return End.LARGEST
