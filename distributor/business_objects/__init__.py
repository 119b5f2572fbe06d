# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import SchemaError, StateValidationError, ConfigurationError
from .items import Item
from .containers import ContainerSpec

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "ConfigurationError",
    # core models
    "Item",
    "ContainerSpec",
]
