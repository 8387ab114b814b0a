"""
Models Package

Exports all models for easy importing.
"""

from shop.models.user import User
from shop.models.product import Product

__all__ = ['User', 'Product']
