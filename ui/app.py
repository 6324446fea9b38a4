"""
User Directory UI

Single page: user table, add/edit form and delete confirmation, all backed
by one `DirectorySession` per browser session.
"""

from pathlib import Path
import logging
import sys
import streamlit as st

# Ensure project root is on sys.path to enable user_directory imports
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from user_directory.io_paths import LOGS_DIR
from user_directory.utils_logging import configure_logging
from ui.state import DirectorySession, build_session, debug_enabled
from ui.components.user_form import render_user_form
from ui.components.user_table import render_delete_confirmation, render_user_table


st.set_page_config(page_title="User Management", page_icon="👥", layout="wide", initial_sidebar_state="collapsed")

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(LOGS_DIR, debug=debug_enabled())

    # Initialize session: store hydrates from storage once per browser session
    if "directory_session" not in st.session_state:
        st.session_state["directory_session"] = build_session()
        logger.info("Started new directory session")
    session: DirectorySession = st.session_state["directory_session"]

    render_user_form(session)
    render_delete_confirmation(session)
    render_user_table(session)


if __name__ == "__main__":
    main()
