"""
Models Package

This file ensures all SQLAlchemy models are imported and registered,
which is required for relationships and metadata.create_all to work correctly.
"""

from models.base import Base
from models.vendor import Vendor
from models.product import Product
from models.category import Category, ProductCategory
from models.cart import Cart
from models.cartItem import CartItem
from models.wishlist import WishlistItem

__all__ = [
    'Base',
    'Vendor',
    'Product',
    'Category',
    'ProductCategory',
    'Cart',
    'CartItem',
    'WishlistItem',
]
