"""Domain logic for Hogar: entry parsing and categorization."""
from .types import MovementType, ParsedGroceryEntry
from .parser import parse_grocery_entry
from .categories import CATEGORIES, FALLBACK_CATEGORY, categorize

__all__ = [
    'MovementType',
    'ParsedGroceryEntry',
    'parse_grocery_entry',
    'CATEGORIES',
    'FALLBACK_CATEGORY',
    'categorize',
]
