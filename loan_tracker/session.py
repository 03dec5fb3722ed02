"""
Session state management for the Loan Tracker application.
Creates the per-session store, navigation, and form drafts.
"""

import logging

import streamlit as st

from loan_tracker.api import ApiClient, run_async
from loan_tracker.config import BACKEND_URL
from loan_tracker.dashboard import DashboardAggregator
from loan_tracker.forms import CustomerForm, LoanForm, PartnerForm
from loan_tracker.navigation import Navigation
from loan_tracker.store import LoanTrackerStore

logger = logging.getLogger(__name__)

# Form placements; each keeps its own draft
FORM_FACTORIES = {
    "quick_customer": CustomerForm,
    "quick_partner": PartnerForm,
    "customers": CustomerForm,
    "partners": PartnerForm,
    "loans": LoanForm,
}


def init_session_state():
    """Initialize all session state variables."""
    if "navigation" not in st.session_state:
        st.session_state.navigation = Navigation()

    if "forms" not in st.session_state:
        st.session_state.forms = {name: factory() for name, factory in FORM_FACTORIES.items()}

    if "aggregator" not in st.session_state:
        st.session_state.aggregator = DashboardAggregator()

    if "store" not in st.session_state:
        logger.info("Starting session against %s", BACKEND_URL)
        st.session_state.store = LoanTrackerStore(ApiClient(BACKEND_URL))


def start_session() -> None:
    """Load the collections once per session; later reruns are no-ops."""
    run_async(get_store().start())


def get_store() -> LoanTrackerStore:
    return st.session_state.store


def get_navigation() -> Navigation:
    return st.session_state.navigation


def get_form(name: str):
    return st.session_state.forms[name]


def create_entity(path: str, data: dict) -> bool:
    """Submit a draft through the store and report whether it was saved."""
    return run_async(get_store().create_entity(path, data))
