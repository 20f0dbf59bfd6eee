"""UI components for Hogar."""
from .sidebar import render_sidebar
from .dashboard import render_dashboard
from .savings import render_savings
from .list_display import render_list_display
from .add_item import render_add_item
from .feedback import render_feedback, render_flash_messages

__all__ = [
    'render_sidebar',
    'render_dashboard',
    'render_savings',
    'render_list_display',
    'render_add_item',
    'render_feedback',
    'render_flash_messages',
]
