"""Data models for catalog records.

All models are Pydantic v2 and frozen. Prices are ``Decimal`` so values from
the API are displayed exactly as sent.
"""

from .product import Product

__all__ = ["Product"]
