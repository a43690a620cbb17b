"""Custom exception hierarchy for the training catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all training_catalog errors."""


class EmptyCollectionError(CatalogError, ValueError):
    """A maximum was requested over an empty sequence."""


class DivisionByZeroError(CatalogError, ZeroDivisionError):
    """An average was requested over zero activities."""

    def __init__(self, message: str = "Cannot average over zero activities") -> None:
        super().__init__(message)


class InvalidCatalogError(CatalogError, ValueError):
    """A catalog entry names an unknown level or type, or lacks a field."""
