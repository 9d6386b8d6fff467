"""
Storefront Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Access level of a user account"""

    user = "user"
    admin = "admin"


class OrderStatus(str, Enum):
    """Fulfillment stage of an order, in the only order it may advance"""

    processing = "Processing"
    shipped = "Shipped"
    delivered = "Delivered"

    @property
    def rank(self) -> int:
        return list(OrderStatus).index(self)


class PaymentMethod(str, Enum):
    """How the customer pays for an order"""

    cod = "COD"
    card = "Card"
