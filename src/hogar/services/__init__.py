"""Services package for Hogar."""
from .base_service import BaseService, Result
from .grocery_service import GroceryService
from .savings_service import SavingsService
from .dashboard_service import DashboardService, DashboardSummary

__all__ = [
    'BaseService',
    'Result',
    'GroceryService',
    'SavingsService',
    'DashboardService',
    'DashboardSummary',
]
