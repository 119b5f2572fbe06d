# -*- coding: utf-8 -*-
"""
Logger setup shared by the command line entry points.

Verbosity is a count (-v, -vv): 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG.
"""

from __future__ import annotations
import logging
import os
from typing import Optional

levels = [
    logging.WARN,
    logging.INFO,
    logging.DEBUG,
]

FORMAT = '%(levelname)s [%(name)s]: %(message)s'


def init_logger(verbose: int, name: str, fh: Optional[str] = None) -> logging.Logger:
    """Logger object init and configure with formatting"""

    verbose = min(max(verbose, 0), len(levels) - 1)

    logger = logging.getLogger(name)
    logger.setLevel(levels[verbose])
    logger.handlers.clear()

    formatter = logging.Formatter(FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(levels[verbose])
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if fh:
        fdir = os.path.dirname(fh)
        if fdir:
            os.makedirs(fdir, exist_ok=True)
        handle = logging.FileHandler(fh, mode='w')
        handle.setLevel(levels[verbose])
        handle.setFormatter(formatter)
        logger.addHandler(handle)

    return logger
