"""Dashboard page component."""
import streamlit as st

from hogar.services.dashboard_service import DashboardService
from hogar.utils.formatting import format_amount, format_currency
from .feedback import render_feedback


def render_dashboard(dashboard_service: DashboardService) -> None:
    """
    Render household savings and grocery figures.

    Args:
        dashboard_service: Service computing the summary
    """
    st.header("Panel de Control")

    result = dashboard_service.get_summary()
    if not result.success:
        render_feedback(result.error, type_="error")
        return
    summary = result.data

    st.subheader("Total Ahorrado")
    st.metric("Ahorro del hogar", format_currency(summary.total_savings))

    highlights = []
    if summary.monthly_growth_pct is not None:
        highlights.append(f"📈 +{summary.monthly_growth_pct:.1f}% este mes")
    if summary.last_deposit is not None:
        highlights.append(f"✅ Último aporte: +{format_amount(summary.last_deposit)}")
    if summary.weekly_streak > 0:
        weeks = "semana" if summary.weekly_streak == 1 else "semanas"
        highlights.append(f"🔥 Racha: {summary.weekly_streak} {weeks}")
    if highlights:
        st.caption("  ·  ".join(highlights))

    st.subheader("Resumen Lista de Mercado")
    total_col, bought_col = st.columns(2)
    with total_col:
        st.metric("Total artículos", summary.total_items)
    with bought_col:
        st.metric("Comprados", summary.bought_items)
