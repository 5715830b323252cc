"""
Error types for catalog, basket and offer handling.

Data file defects all derive from CorruptDataError and carry the 1-based
line number where the file went wrong.
"""

from typing import Any, Dict, Optional, Sequence


class PriceBasketError(Exception):
    """
    Base exception for all pricebasket errors.

    Provides common functionality for error tracking and reporting.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the error.

        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidItemError(PriceBasketError, ValueError):
    """Raised when an item name normalizes to nothing."""

    def __init__(self, raw_name: str):
        super().__init__("Item ID must not be blank", {"raw_name": raw_name})
        self.raw_name = raw_name


class UnknownItemError(PriceBasketError, LookupError):
    """Raised when adding an item that the catalog does not know about."""

    def __init__(self, item: Any):
        super().__init__(f"{item} doesn't exist in the catalog", {"item": str(item)})
        self.item = item


class DataFileNotFoundError(PriceBasketError):
    """Raised when a data file exists neither on disk nor as a packaged default."""

    def __init__(self, name: str, searched: Optional[str] = None):
        super().__init__(
            f"Data file '{name}' not found and no default is packaged",
            {"name": name, "searched": searched},
        )
        self.name = name


class ConfigError(PriceBasketError):
    """Raised when a configuration file cannot be read."""


class CorruptDataError(PriceBasketError):
    """
    Raised when a data file is not in its intended format.

    What "corrupt" means is specific to the file being processed; in every
    case the file cannot be turned into a catalog or offer package.
    """

    def __init__(self, message: str,
                 line_number: int,
                 source: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize corrupt data error.

        Args:
            message: Description of the corruption
            line_number: 1-based line where the file is corrupt
            source: Name of the data file, if known
            details: Additional error context
        """
        super().__init__(f"{message} (line {line_number})", details)
        self.reason = message
        self.line_number = line_number
        self.source = source

        self.details.update({
            'line_number': line_number,
            'source': source,
        })


class MalformedEntryError(CorruptDataError):
    """A catalog line lacks either the item name or the price."""


class MalformedPriceError(CorruptDataError):
    """A catalog price is not a non-negative amount with at most 2 decimals."""


class DuplicateEntryError(CorruptDataError):
    """A catalog item appears twice once names are normalized."""

    def __init__(self, item: Any, line_number: int, source: Optional[str] = None):
        super().__init__(f"Duplicate entry found for {item}", line_number, source,
                         {'item': str(item)})
        self.item = item


class UnsupportedRuleError(CorruptDataError):
    """No registered parser accepts an offer rule."""

    def __init__(self, rule: str, line_number: int, source: Optional[str] = None):
        super().__init__(f"Unsupported offer rule: {rule}", line_number, source,
                         {'rule': rule})
        self.rule = rule


class AmbiguousRuleError(CorruptDataError):
    """More than one registered parser accepts an offer rule."""

    def __init__(self, rule: str,
                 line_number: int,
                 parsers: Sequence[str] = (),
                 source: Optional[str] = None):
        super().__init__(f"Ambiguous offer rule: {rule}", line_number, source,
                         {'rule': rule, 'parsers': list(parsers)})
        self.rule = rule
        self.parsers = list(parsers)


def is_catalog_error(error: Exception) -> bool:
    """Check if error is a catalog data file defect."""
    return isinstance(error, (MalformedEntryError, MalformedPriceError, DuplicateEntryError))


def is_offer_error(error: Exception) -> bool:
    """Check if error is an offer data file defect."""
    return isinstance(error, (UnsupportedRuleError, AmbiguousRuleError))
