"""Main Streamlit application for Hogar.

Run with ``streamlit run src/hogar/web/app.py``.
"""
import uuid
from typing import Tuple

import streamlit as st

from hogar.config.settings import get_settings, get_streamlit_settings
from hogar.db.init_db import init_db
from hogar.db.session import get_session
from hogar.models import GroceryItem, SavingsMovement
from hogar.realtime import ChangeNotifier, TableVersions, WatchedSession
from hogar.services import DashboardService, GroceryService, SavingsService
from hogar.utils.logger import get_logger
from hogar.web.components import (
    render_sidebar,
    render_dashboard,
    render_savings,
    render_list_display,
    render_add_item,
    render_flash_messages,
)

logger = get_logger(__name__)

WATCHED_TABLES = (GroceryItem.__tablename__, SavingsMovement.__tablename__)


@st.cache_resource
def get_change_feed() -> Tuple[ChangeNotifier, TableVersions]:
    """Process-wide notifier plus a version counter per watched table."""
    notifier = ChangeNotifier()
    return notifier, TableVersions(notifier, WATCHED_TABLES)


@st.cache_resource
def bootstrap_database():
    """Create tables and the active user once per process."""
    return init_db()


def init_session_state() -> None:
    """Initialize session state variables."""
    if 'session_id' not in st.session_state:
        st.session_state.session_id = str(uuid.uuid4())
        logger.info("New session started", session_id=st.session_state.session_id)

    if 'watched_session' not in st.session_state:
        notifier, _ = get_change_feed()
        # Detached and closed once Streamlit drops this session's state
        st.session_state.watched_session = WatchedSession(notifier, get_session())

    if 'seen_versions' not in st.session_state:
        st.session_state.seen_versions = {}


def watch_for_changes() -> None:
    """Rerun the page when another session commits to a watched table."""
    interval = get_streamlit_settings().REFRESH_SECONDS
    if not interval:
        return

    @st.fragment(run_every=interval)
    def _poll() -> None:
        _, versions = get_change_feed()
        if versions.snapshot() != st.session_state.seen_versions:
            logger.debug("Watched tables changed, refreshing", session_id=st.session_state.session_id)
            st.rerun(scope="app")

    _poll()


def main() -> None:
    """Main application entry point."""
    ui_settings = get_streamlit_settings()
    st.set_page_config(
        page_title=ui_settings.PAGE_TITLE,
        page_icon=ui_settings.PAGE_ICON,
        layout=ui_settings.LAYOUT,
    )

    try:
        user = bootstrap_database()
        init_session_state()

        settings = get_settings()
        db_session = st.session_state.watched_session.session
        # Other sessions may have committed since the last run
        db_session.expire_all()

        grocery_service = GroceryService(db_session, settings.ACTIVE_USER_ID)
        savings_service = SavingsService(db_session, settings.ACTIVE_USER_ID)
        dashboard_service = DashboardService(db_session, settings.ACTIVE_USER_ID)

        page = render_sidebar(user.display_name or user.email)
        render_flash_messages()

        if page == "dashboard":
            render_dashboard(dashboard_service)
        elif page == "savings":
            render_savings(savings_service)
        else:
            render_add_item(grocery_service)
            render_list_display(grocery_service)

        _, versions = get_change_feed()
        st.session_state.seen_versions = versions.snapshot()
        watch_for_changes()

    except Exception:
        logger.exception(
            "Unhandled error in main application",
            session_id=st.session_state.get('session_id', 'error')
        )
        st.error("Error en el sistema. Por favor intenta de nuevo más tarde.")


if __name__ == "__main__":
    main()
