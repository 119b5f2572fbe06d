# -*- coding: utf-8 -*-
"""
File distributor: greedy assignment of sized files to capacity-bounded nodes.

Typical use:

    from distributor import Allocator

    alloc = Allocator()
    alloc.add_item("tom.dat", 1024)
    alloc.add_container("node1", 4096)
    matchings = alloc.allocate()   # {"tom.dat": "node1"}
"""

from .planning.allocator import Allocator
from .planning.policy import Policy

__all__ = ["Allocator", "Policy"]

__version__ = "0.1.0"
