# -*- coding: utf-8 -*-
"""
Container ordering policies.

Two separate orderings drive container selection:
  1) by_capacity_desc -> untouched containers, largest capacity first
  2) by_load_asc      -> processed containers, least occupied first

Neither key depends on a mode flag stored on the container; the caller
decides which pool (and therefore which policy) a container belongs to.
Ties are left to the caller (ContainerPools breaks them by add order).
"""

from __future__ import annotations
from typing import Tuple

from distributor.planning.state import Container


def by_capacity_desc(c: Container) -> Tuple[int]:
    return (-c.capacity,)


def by_load_asc(c: Container) -> Tuple[int]:
    return (c.occupied,)
