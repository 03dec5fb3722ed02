"""
Dashboard module for the Loan Tracker application.
Derives funded-loan totals from the loans collection and renders the KPI cards.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

import plotly.graph_objects as go
import streamlit as st

from loan_tracker.config import THEME_COLORS
from loan_tracker.models import FUNDED, LOAN_STATUSES


@dataclass(frozen=True)
class DashboardTotals:
    funded_count: int = 0
    funded_amount: float = 0
    commission: float = 0


def calculate_dashboard_totals(loans: Sequence[Mapping[str, Any]]) -> DashboardTotals:
    """Count funded loans and sum their amounts and commissions.

    Missing or falsy amounts count as 0.
    """
    funded = [loan for loan in loans if loan.get("status") == FUNDED]
    funded_amount = sum(loan.get("amount") or 0 for loan in funded)
    commission = sum(loan.get("commission_amount") or 0 for loan in funded)
    return DashboardTotals(
        funded_count=len(funded),
        funded_amount=funded_amount,
        commission=commission,
    )


def calculate_status_counts(loans: Sequence[Mapping[str, Any]]) -> Dict[str, int]:
    """Count loans per status, listing every known status even when zero."""
    counts = Counter(loan.get("status") for loan in loans)
    result = {status: counts.get(status, 0) for status in LOAN_STATUSES}
    for status, count in counts.items():
        if status not in result:
            result[str(status)] = count
    return result


class DashboardAggregator:
    """Caches dashboard totals until the loans collection is replaced."""

    def __init__(self):
        self._loans: Optional[Sequence[Mapping[str, Any]]] = None
        self._totals = DashboardTotals()

    def totals(self, loans: Sequence[Mapping[str, Any]]) -> DashboardTotals:
        if loans is not self._loans:
            self._totals = calculate_dashboard_totals(loans)
            self._loans = loans
        return self._totals


def format_currency(value: Any) -> str:
    """Format a number as whole-dollar currency, e.g. $12,500."""
    amount = float(value or 0)
    if amount.is_integer():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def get_plotly_theme() -> Dict:
    """Get Plotly theme configuration matching the app theme."""
    colors = THEME_COLORS

    return {
        "paper_bgcolor": "rgba(0,0,0,0)",
        "plot_bgcolor": "rgba(0,0,0,0)",
        "font": {
            "color": colors["text_secondary"],
            "family": "system-ui, -apple-system, sans-serif"
        },
    }


def render_kpi_section(totals: DashboardTotals) -> None:
    """Render the three funded-loan KPI cards."""
    cards = [
        ("Funded Loans", str(totals.funded_count)),
        ("Funded Volume", format_currency(totals.funded_amount)),
        ("Commission", format_currency(totals.commission)),
    ]
    for column, (label, value) in zip(st.columns(3), cards):
        with column:
            st.markdown(f"""
                <div class="kpi-card">
                    <div class="kpi-label">{label}</div>
                    <div class="kpi-value">{value}</div>
                </div>
            """, unsafe_allow_html=True)


def render_loan_status_chart(loans: Sequence[Mapping[str, Any]]) -> None:
    """Render loan status distribution donut chart."""
    if not loans:
        return

    theme = get_plotly_theme()
    status_counts = calculate_status_counts(loans)
    labels = [s.title() for s in status_counts]
    values = list(status_counts.values())

    colors = THEME_COLORS
    color_map = {
        "Applied": "#60a5fa",
        "Approved": "#06b6d4",
        "Funded": colors["success"],
        "Rejected": colors["danger"],
        "Closed": "#64748b",
    }

    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=values,
        hole=0.5,
        marker=dict(colors=[color_map.get(label, colors["accent"]) for label in labels]),
        textinfo='label+value',
        hovertemplate='<b>%{label}</b><br>Count: %{value}<extra></extra>'
    )])

    fig.update_layout(
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        font=theme["font"],
        showlegend=False,
        margin=dict(t=20, b=20, l=20, r=20),
        height=300,
        annotations=[dict(
            text=f"<b>{len(loans)}</b><br>Loans",
            x=0.5, y=0.5,
            showarrow=False
        )]
    )

    st.plotly_chart(fig, use_container_width=True)
