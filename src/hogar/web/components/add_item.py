"""Add item component for the grocery list."""
import streamlit as st

from hogar.domain.categories import CATEGORIES
from hogar.services.grocery_service import GroceryService
from .feedback import render_feedback, flash

AUTO_CATEGORY = "Automática"


def _submit(grocery_service: GroceryService, text: str, **overrides) -> None:
    result = grocery_service.add_item(text, **overrides)
    if result.success:
        item = result.data
        unit = f" {item.unit}" if item.unit else ""
        flash(f"{item.name} ({item.quantity:g}{unit}) añadido a {item.category}")
        st.rerun()
    else:
        render_feedback(result.error, type_="error", suggestions=result.suggestions)


def render_add_item(grocery_service: GroceryService) -> None:
    """
    Render the add item form and suggestions from past purchases.

    Args:
        grocery_service: Service for the grocery list
    """
    st.subheader("Añadir Nuevo Artículo")

    with st.form("add_item", clear_on_submit=True):
        text = st.text_input(
            "Artículo",
            placeholder="Ej: 2 litros de leche",
            key="add_item_text"
        )
        with st.expander("Ajustes manuales"):
            manual = st.checkbox("Usar cantidad y unidad manuales", key="add_item_manual")
            qty_col, unit_col = st.columns(2)
            with qty_col:
                quantity = st.number_input(
                    "Cantidad",
                    min_value=0.0,
                    value=1.0,
                    step=1.0,
                    key="add_item_quantity"
                )
            with unit_col:
                unit = st.text_input("Unidad (Opcional)", key="add_item_unit")
            category = st.selectbox(
                "Categoría",
                options=[AUTO_CATEGORY, *CATEGORIES],
                key="add_item_category"
            )

        submit = st.form_submit_button("Añadir a la Lista")

        if submit:
            overrides = {}
            if manual:
                overrides["quantity"] = quantity
                overrides["unit"] = unit
            if category != AUTO_CATEGORY:
                overrides["category"] = category
            _submit(grocery_service, text, **overrides)

    suggestions = grocery_service.suggest_items()
    if suggestions.success and suggestions.data:
        st.caption("Comprados antes:")
        cols = st.columns(len(suggestions.data))
        for col, name in zip(cols, suggestions.data):
            with col:
                if st.button(name, key=f"suggest_{name}"):
                    _submit(grocery_service, name)
