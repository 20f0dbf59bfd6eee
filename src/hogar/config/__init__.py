"""Configuration package for Hogar."""
from .settings import (
    HogarSettings,
    StreamlitSettings,
    get_settings,
    get_streamlit_settings,
    clear_settings_cache,
)

__all__ = [
    'HogarSettings',
    'StreamlitSettings',
    'get_settings',
    'get_streamlit_settings',
    'clear_settings_cache',
]
