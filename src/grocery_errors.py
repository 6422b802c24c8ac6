#!/usr/bin/env python3
"""
Grocery list exceptions.

The consolidation engine itself never raises for malformed measurement
text; these are raised by the layers around it (settings, recipe input).
"""

from typing import Any, Dict


class GroceryListError(Exception):
    """Base exception for grocery list errors."""

    def __init__(self, message: str, error_code: str = None, details: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(GroceryListError):
    """Raised when settings cannot be loaded or are invalid."""
    pass


class InputFormatError(GroceryListError):
    """Raised when recipe input does not have the expected shape."""

    def __init__(self, message: str, source: str = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
