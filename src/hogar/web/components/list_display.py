"""List display component for showing grocery items and their actions."""
import streamlit as st

from hogar.models import GroceryItem
from hogar.services.grocery_service import GroceryService
from .feedback import render_feedback, flash


def _describe(item: GroceryItem) -> str:
    unit = f" {item.unit}" if item.unit else ""
    return f"**{item.name}** ({item.quantity:g}{unit})"


def _render_item(grocery_service: GroceryService, item: GroceryItem) -> None:
    name_col, buy_col, del_col = st.columns([5, 1, 1])

    with name_col:
        label = _describe(item)
        st.markdown(f"~~{label}~~" if item.is_bought else label)

    with buy_col:
        if st.button(
            "⬜" if item.is_bought else "✅",
            key=f"toggle_{item.id}",
            help="Marcar como no comprado" if item.is_bought else "Marcar como comprado"
        ):
            result = grocery_service.toggle_bought(item.id)
            if result.success:
                st.rerun()
            else:
                render_feedback(result.error, type_="error")

    with del_col:
        if st.button("❌", key=f"del_{item.id}", help="Eliminar artículo"):
            result = grocery_service.delete_item(item.id)
            if result.success:
                st.rerun()
            else:
                render_feedback(result.error, type_="error")


def render_list_display(grocery_service: GroceryService) -> None:
    """
    Render the grocery list grouped by category.

    Args:
        grocery_service: Service for the grocery list
    """
    st.subheader("Artículos de la Lista")

    result = grocery_service.get_items()
    if not result.success:
        render_feedback(result.error, type_="error")
        return

    items = result.data
    if not items:
        st.info("La lista de mercado está vacía.")
        return

    pending = [item for item in items if not item.is_bought]
    bought = [item for item in items if item.is_bought]

    for category, grouped in grocery_service.group_by_category(pending).items():
        st.markdown(f"#### {category}")
        for item in grouped:
            _render_item(grocery_service, item)

    if bought:
        with st.expander(f"Comprados ({len(bought)})"):
            for item in bought:
                _render_item(grocery_service, item)
            if st.button("Archivar comprados", key="archive_bought"):
                archived = grocery_service.archive_bought()
                if archived.success:
                    flash(f"{archived.data} artículos archivados")
                    st.rerun()
                else:
                    render_feedback(archived.error, type_="error")
