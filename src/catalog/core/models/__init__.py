from .product import ProductDto, ensure_valid, validate_product

__all__ = ["ProductDto", "ensure_valid", "validate_product"]
