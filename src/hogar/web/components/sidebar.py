"""Sidebar component for page navigation."""
import streamlit as st

PAGES = {
    "dashboard": "📊 Panel",
    "savings": "💰 Ahorros",
    "groceries": "🛒 Lista de Mercado",
}


def render_sidebar(user_label: str) -> str:
    """
    Render the sidebar with page navigation.

    Args:
        user_label: Name or email of the active user

    Returns:
        Key of the selected page
    """
    with st.sidebar:
        st.title("🏠 Hogar")
        st.caption(user_label)
        st.divider()
        page = st.radio(
            "Ir a",
            options=list(PAGES),
            format_func=PAGES.get,
            key="page"
        )
    return str(page)
