"""Entity package: Product."""

from .entity import ProductRecord
from .repository import ProductStore
from .table import ProductTable

__all__ = ["ProductRecord", "ProductStore", "ProductTable"]
