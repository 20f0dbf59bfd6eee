"""Feedback component for displaying user messages."""
from typing import Optional, List
import streamlit as st


def render_feedback(
    message: str,
    type_: str = "info",
    suggestions: Optional[List[str]] = None
) -> None:
    """
    Display a feedback message with optional suggestions.

    Args:
        message: The message to display
        type_: Type of message ('success', 'error', or 'info')
        suggestions: Optional hints shown under the message
    """
    if type_ == "success":
        st.success(message)
    elif type_ == "error":
        st.error(message)
    else:
        st.info(message)

    if suggestions:
        for suggestion in suggestions:
            st.caption(f"• {suggestion}")


def flash(message: str) -> None:
    """Queue a success message to show after the next rerun."""
    st.session_state.setdefault("flash_messages", []).append(message)


def render_flash_messages() -> None:
    """Show and clear queued success messages."""
    for message in st.session_state.pop("flash_messages", []):
        render_feedback(message, type_="success")
