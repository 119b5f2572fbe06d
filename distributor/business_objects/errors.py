# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when an input record file violates the two-column format."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class ConfigurationError(ValueError):
    """Raised when a run cannot start, e.g. items were supplied but no containers."""
