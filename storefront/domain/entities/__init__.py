"""
Storefront Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import OrderStatus, PaymentMethod, UserRole

from .user import User
from .product import Product
from .order import Order

__all__ = [
    # Enums
    "UserRole",
    "OrderStatus",
    "PaymentMethod",
    # Entities
    "User",
    "Product",
    "Order",
]
