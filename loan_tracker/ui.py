"""UI helpers for the Loan Tracker Streamlit frontend."""

from __future__ import annotations

import html
from contextlib import contextmanager
from datetime import date
from typing import Any, Iterator, Mapping, Sequence

import streamlit as st

from loan_tracker.config import PAGE_CONFIG, get_custom_css
from loan_tracker.forms import EntityForm, Field, LoanForm, text_value
from loan_tracker.navigation import TABS
from loan_tracker.session import create_entity, get_navigation, get_store
from loan_tracker.store import AppState, LoanTrackerStore

# Earliest application or funded date the date pickers accept
EARLIEST_DATE = date(1970, 1, 1)


def setup_page() -> None:
    """Apply Streamlit page config and the app CSS."""
    if not st.session_state.get("_page_configured"):
        st.set_page_config(**PAGE_CONFIG)
        st.session_state._page_configured = True

    st.markdown(get_custom_css(), unsafe_allow_html=True)


def render_nav_bar() -> None:
    """Render the brand and the four tab buttons."""
    navigation = get_navigation()
    columns = st.columns([3] + [1] * len(TABS))

    with columns[0]:
        st.markdown("<div class='brand'>🔥 Loan Tracker</div>", unsafe_allow_html=True)

    for column, (key, label) in zip(columns[1:], TABS):
        with column:
            if st.button(label, key=f"nav_{key}", use_container_width=True,
                         type="primary" if navigation.is_current(key) else "secondary"):
                navigation.select(key)
                st.rerun()


@st.fragment(run_every=1)
def render_message_banner() -> None:
    """Show the store message; re-checked every second so success banners expire."""
    state = get_store().snapshot()
    if not state.message:
        return
    css_class = "message-banner error" if state.message_is_error else "message-banner"
    st.markdown(
        f"<div class='{css_class}'>{html.escape(state.message)}</div>",
        unsafe_allow_html=True,
    )


class LoadingIndicator:
    """Store listener that draws "Loading..." into a placeholder while work is in flight."""

    def __init__(self, placeholder):
        self.placeholder = placeholder

    def __call__(self, state: AppState) -> None:
        if state.loading:
            self.placeholder.markdown("<div class='loading-indicator'>Loading...</div>", unsafe_allow_html=True)
        else:
            self.placeholder.empty()


@contextmanager
def show_loading(store: LoanTrackerStore) -> Iterator[LoadingIndicator]:
    """Keep a loading indicator subscribed to the store for the duration of the block."""
    indicator = LoadingIndicator(st.empty())
    unsubscribe = store.subscribe(indicator)
    try:
        yield indicator
    finally:
        unsubscribe()
        indicator.placeholder.empty()


def render_section_title(title: str) -> None:
    st.markdown(f"<div class='section-title'>{html.escape(title)}</div>", unsafe_allow_html=True)


def _widget_key(form_name: str, field_key: str) -> str:
    return f"{form_name}__{field_key}"


def _on_field_change(form: EntityForm, field_key: str, widget_key: str) -> None:
    form.update(field_key, st.session_state[widget_key])


def _display_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return text_value(value)


def _parse_date(value: str):
    try:
        return date.fromisoformat(value) if value else None
    except ValueError:
        return None


def _render_select(form: EntityForm, form_name: str, field: Field, options: Sequence) -> None:
    key = _widget_key(form_name, field.key)
    values = [value for value, _ in options]
    labels = {value: label for value, label in options}
    current = form.draft.get(field.key)
    st.selectbox(
        field.label,
        values,
        index=values.index(current) if current in values else 0,
        format_func=lambda value: labels.get(value, str(value)),
        key=key,
        on_change=_on_field_change,
        args=(form, field.key, key),
    )


def _render_field(
    form: EntityForm,
    form_name: str,
    field: Field,
    customers: Sequence[Mapping[str, Any]],
    partners: Sequence[Mapping[str, Any]],
) -> None:
    key = _widget_key(form_name, field.key)
    value = form.draft.get(field.key)

    if field.kind == "select":
        if field.key == "customer_id":
            options = LoanForm.customer_options(customers)
        elif field.key == "partner_id":
            options = LoanForm.partner_options(partners)
        else:
            options = [(status, status) for status in LoanForm.statuses]
        _render_select(form, form_name, field, options)
    elif field.kind == "date":
        st.date_input(
            field.label,
            value=_parse_date(value),
            min_value=EARLIEST_DATE,
            key=key,
            on_change=_on_field_change,
            args=(form, field.key, key),
        )
    else:
        st.text_input(
            field.label,
            value=_display_value(value),
            key=key,
            on_change=_on_field_change,
            args=(form, field.key, key),
        )


def render_entity_form(
    form: EntityForm,
    form_name: str,
    customers: Sequence[Mapping[str, Any]] = (),
    partners: Sequence[Mapping[str, Any]] = (),
) -> None:
    """Render a form's inputs in two columns with its save button."""
    columns = st.columns(2)
    for idx, field in enumerate(form.fields):
        with columns[idx % 2]:
            _render_field(form, form_name, field, customers, partners)

    _, button_col = st.columns([4, 1])
    with button_col:
        if st.button(form.submit_label, key=_widget_key(form_name, "submit"),
                     type="primary", use_container_width=True):
            with show_loading(get_store()):
                form.submit(lambda data: create_entity(form.path, data))
            st.rerun()
