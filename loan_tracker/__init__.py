# Loan Tracker package
# Streamlit front end for loans, customers, and referral partners

from loan_tracker.api import ApiClient
from loan_tracker.dashboard import DashboardTotals, calculate_dashboard_totals
from loan_tracker.exceptions import LoanTrackerError, RequestFailed
from loan_tracker.store import AppState, LoanTrackerStore

__all__ = [
    "ApiClient",
    "AppState",
    "DashboardTotals",
    "LoanTrackerError",
    "LoanTrackerStore",
    "RequestFailed",
    "calculate_dashboard_totals",
]
