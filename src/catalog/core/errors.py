"""Exceptions raised by the catalog's own layers.

Storage faults are not wrapped: SQLAlchemy and driver errors, as well as
``asyncio.CancelledError``, reach the caller unchanged.
"""

from dataclasses import dataclass


class CatalogError(Exception):
    """Base class for catalog errors."""


@dataclass(frozen=True)
class Violation:
    """A single failed field constraint."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ProductValidationError(CatalogError, ValueError):
    """Raised when a product fails its field constraints, before any storage call."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        super().__init__(
            "Invalid product: " + "; ".join(str(v) for v in self.violations)
        )
