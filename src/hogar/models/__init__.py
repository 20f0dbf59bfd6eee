"""Models package for Hogar."""
from .base import Base
from .user import User
from .item import GroceryItem
from .savings import SavingsMovement

__all__ = ['Base', 'User', 'GroceryItem', 'SavingsMovement']
