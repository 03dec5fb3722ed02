"""
Loan Tracker - Streamlit Frontend

Tabbed CRUD front end for loan applications, customers, and referral partners.
Talks to the REST backend configured by LOAN_TRACKER_BACKEND_URL.

Run with: streamlit run loan_tracker/streamlit_app.py
"""

from loan_tracker.config import configure_logging
from loan_tracker.session import get_navigation, get_store, init_session_state, start_session
from loan_tracker.ui import (
    setup_page,
    render_nav_bar,
    render_message_banner,
    show_loading,
)
from loan_tracker.views import PAGES


def main():
    """Main application entry point."""
    configure_logging()

    # Setup page configuration
    setup_page()

    # Initialize session state
    init_session_state()

    # Load collections on the first run, with the loading indicator up meanwhile
    with show_loading(get_store()):
        start_session()

    render_nav_bar()
    render_message_banner()

    # Render the appropriate page based on selection
    PAGES[get_navigation().current]()


if __name__ == "__main__":
    main()
