"""Savings page component."""
import streamlit as st

from hogar.config.settings import get_settings
from hogar.domain.types import MovementType
from hogar.services.savings_service import SavingsService
from hogar.utils.formatting import format_currency
from .feedback import render_feedback, flash


def render_savings(savings_service: SavingsService) -> None:
    """
    Render the savings balance, movement form and history.

    Args:
        savings_service: Service for the acting user's movements
    """
    st.header("Control de Ahorros")

    result = savings_service.get_movements()
    if not result.success:
        render_feedback(result.error, type_="error")
        return
    movements = result.data

    total = savings_service.get_total()
    if total.success:
        st.subheader(f"Ahorro Total: {format_currency(total.data)}")

    with st.form("add_movement", clear_on_submit=True):
        st.write("Añadir Nuevo Movimiento")
        amount = st.number_input(
            f"Monto ({get_settings().CURRENCY_CODE})",
            min_value=0.0,
            step=1000.0,
            key="movement_amount"
        )
        type_ = st.selectbox(
            "Tipo",
            options=list(MovementType),
            format_func=lambda t: t.label,
            key="movement_type"
        )
        description = st.text_area("Descripción (Opcional)", key="movement_description")
        submit = st.form_submit_button("Añadir Movimiento")

        if submit:
            added = savings_service.add_movement(amount, type_, description)
            if added.success:
                flash(f"{type_.label} de {format_currency(added.data.amount)} registrado")
                st.rerun()
            else:
                render_feedback(added.error, type_="error", suggestions=added.suggestions)

    with st.expander("Historial de Movimientos", expanded=True):
        if not movements:
            st.caption("No hay movimientos registrados aún.")
        for movement in movements:
            info_col, action_col = st.columns([5, 1])
            with info_col:
                sign = "+" if movement.type == MovementType.DEPOSIT else "-"
                st.write(f"**{movement.type.label}:** {sign}{format_currency(movement.amount)}")
                st.caption(
                    f"{movement.description or 'Sin descripción'} · "
                    f"{movement.created_at:%Y-%m-%d %H:%M}"
                )
            with action_col:
                if st.button("🗑️", key=f"del_movement_{movement.id}", help="Eliminar movimiento"):
                    deleted = savings_service.delete_movement(movement.id)
                    if deleted.success:
                        st.rerun()
                    else:
                        render_feedback(deleted.error, type_="error")
