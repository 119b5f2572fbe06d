# -*- coding: utf-8 -*-
"""
I/O helpers for loading distribution inputs.

Both input files share the same two-column text format:

    # filename size            <- comment, ignored
    tom.dat 1024
    jerry.dat 16553

Each data line is an identifier and a nonnegative integer separated by
whitespace. Blank lines are skipped; anything else is a SchemaError.

These map directly to:
- business_objects.items.Item
- business_objects.containers.ContainerSpec
"""

from __future__ import annotations
import re
from typing import Iterable, List, Tuple

from distributor.business_objects.containers import ContainerSpec
from distributor.business_objects.errors import SchemaError
from distributor.business_objects.items import Item

COMMENT = re.compile(r"\s*#.*")
DATA = re.compile(r"\s*(\S+)\s+([0-9]+)\s*")


def parse_records(lines: Iterable[str], source: str = "<input>") -> List[Tuple[str, int]]:
    """
    Parse two-column records, returning (identifier, value) pairs in order.
    """
    records: List[Tuple[str, int]] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip() or COMMENT.fullmatch(line):
            continue
        m = DATA.fullmatch(line)
        if m is None:
            raise SchemaError(
                f"{source}:{lineno}: expected '<name> <non-negative integer>', got {line!r}"
            )
        records.append((m.group(1), int(m.group(2))))
    return records


def _read_records(path: str) -> List[Tuple[str, int]]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_records(f, source=path)
    except OSError as e:
        raise SchemaError(f"{path}: failed to read file: {e}") from e


def read_items_txt(path: str) -> List[Item]:
    """Load files (name + size) from a two-column text file."""
    return [Item(id=name, size=size) for name, size in _read_records(path)]


def read_containers_txt(path: str) -> List[ContainerSpec]:
    """Load nodes (name + capacity) from a two-column text file."""
    return [ContainerSpec(id=name, capacity=cap) for name, cap in _read_records(path)]
