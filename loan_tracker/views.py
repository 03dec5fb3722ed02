"""
Tab views: the dashboard and the three entity pages.
"""

from typing import List

import streamlit as st

from loan_tracker.dashboard import format_currency, render_kpi_section, render_loan_status_chart
from loan_tracker.session import get_form, get_store
from loan_tracker.table import Column, render_table
from loan_tracker.ui import render_entity_form, render_section_title

CUSTOMER_COLUMNS: List[Column] = [
    Column("first_name", "First"),
    Column("last_name", "Last"),
    Column("email", "Email"),
    Column("phone", "Phone"),
]

PARTNER_COLUMNS: List[Column] = [
    Column("name", "Name"),
    Column("contact_name", "Contact"),
    Column("email", "Email"),
    Column("commission_rate", "Rate (%)"),
]

LOAN_COLUMNS: List[Column] = [
    Column("status", "Status"),
    Column("amount", "Amount", render=lambda v, _: format_currency(v)),
    Column("commission_amount", "Commission", render=lambda v, _: format_currency(v)),
    Column("application_date", "Applied"),
    Column("funded_date", "Funded"),
]


def render_dashboard_page() -> None:
    state = get_store().snapshot()
    render_kpi_section(st.session_state.aggregator.totals(state.loans))
    render_loan_status_chart(state.loans)

    col_customer, col_partner = st.columns(2)
    with col_customer:
        render_section_title("Quick Add: Customer")
        render_entity_form(get_form("quick_customer"), "quick_customer")
    with col_partner:
        render_section_title("Quick Add: Partner")
        render_entity_form(get_form("quick_partner"), "quick_partner")


def render_customers_page() -> None:
    state = get_store().snapshot()
    render_section_title("Customers")
    render_entity_form(get_form("customers"), "customers")
    render_table(state.customers, CUSTOMER_COLUMNS, "No customers yet")


def render_partners_page() -> None:
    state = get_store().snapshot()
    render_section_title("Referral Partners")
    render_entity_form(get_form("partners"), "partners")
    render_table(state.partners, PARTNER_COLUMNS, "No partners yet")


def render_loans_page() -> None:
    state = get_store().snapshot()
    render_section_title("Loans")
    render_entity_form(get_form("loans"), "loans", customers=state.customers, partners=state.partners)
    render_table(state.loans, LOAN_COLUMNS, "No loans yet")


PAGES = {
    "dashboard": render_dashboard_page,
    "customers": render_customers_page,
    "partners": render_partners_page,
    "loans": render_loans_page,
}
