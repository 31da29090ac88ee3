"""Entities organized by business concept.

Each entity package holds its domain model (entity.py), its persistence
model (table.py) and its data access layer (repository.py).
"""

from .product import ProductRecord, ProductStore, ProductTable

__all__ = ["ProductRecord", "ProductStore", "ProductTable"]
