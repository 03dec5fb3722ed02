"""
Configuration settings for the Loan Tracker frontend.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# ======================
# Backend Configuration
# ======================

DEFAULT_BACKEND_URL = "http://localhost:8000"

BACKEND_URL = os.getenv("LOAN_TRACKER_BACKEND_URL", DEFAULT_BACKEND_URL)

CUSTOMERS_PATH = "/api/customers"
PARTNERS_PATH = "/api/partners"
LOANS_PATH = "/api/loans"


def get_request_timeout() -> Optional[float]:
    """Read the per-request timeout from the environment.

    Returns:
        Timeout in seconds, or None when unset (requests never time out)
    """
    raw = os.getenv("LOAN_TRACKER_REQUEST_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


# ======================
# Store Configuration
# ======================

# Seconds a success banner stays visible
SUCCESS_MESSAGE_TTL = 2.0

SUCCESS_MESSAGE = "Saved successfully"

# ======================
# Logging Configuration
# ======================

LOG_LEVEL = os.getenv("LOAN_TRACKER_LOG_LEVEL", "INFO").upper()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the package logger (once).

    Args:
        level: Level name; falls back to LOAN_TRACKER_LOG_LEVEL

    Returns:
        The configured ``loan_tracker`` logger
    """
    logger = logging.getLogger("loan_tracker")
    logger.setLevel(level or LOG_LEVEL)

    if not any(getattr(h, "_loan_tracker", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler._loan_tracker = True
        logger.addHandler(handler)

    return logger


# ======================
# UI Configuration
# ======================

PAGE_CONFIG = {
    "page_title": "Loan Tracker",
    "page_icon": "🔥",
    "layout": "wide",
    "initial_sidebar_state": "collapsed"
}

# Theme colors
THEME_COLORS = {
    "bg_primary": "#0f172a",
    "bg_secondary": "#1e293b",
    "panel_border": "rgba(51, 65, 85, 0.5)",
    "text_primary": "#ffffff",
    "text_secondary": "#bfdbfe",
    "muted_text": "rgba(191, 219, 254, 0.6)",
    "accent": "#2563eb",
    "banner_bg": "rgba(37, 99, 235, 0.2)",
    "banner_border": "rgba(59, 130, 246, 0.3)",
    "banner_text": "#dbeafe",
    "error_bg": "rgba(239, 68, 68, 0.15)",
    "error_border": "rgba(239, 68, 68, 0.35)",
    "card_bg": "rgba(30, 41, 59, 0.6)",
    "table_text": "rgba(239, 246, 255, 0.9)",
    "success": "#10b981",
    "danger": "#ef4444",
}


def get_custom_css() -> str:
    """Generate the app CSS from THEME_COLORS."""
    colors = THEME_COLORS
    background_gradient = (
        f"linear-gradient(135deg, {colors['bg_primary']} 0%, "
        f"{colors['bg_secondary']} 50%, {colors['bg_primary']} 100%)"
    )

    return f"""
    <style>
    /* ===== Base Styles ===== */
    html, body, [data-testid="stAppViewContainer"] {{
        min-height: 100vh;
        background: {background_gradient};
        color: {colors['text_primary']};
    }}

    .stApp {{
        background: transparent;
    }}

    [data-testid="stHeader"] {{
        background: transparent !important;
    }}

    .block-container {{
        max-width: 72rem;
        padding: 1.5rem 1.5rem 3rem;
    }}

    label, .stMarkdown p {{
        color: {colors['text_secondary']};
    }}

    /* ===== Brand ===== */
    .brand {{
        display: flex;
        align-items: center;
        gap: 0.75rem;
        height: 2.5rem;
        color: {colors['text_primary']};
        font-weight: 600;
        letter-spacing: -0.01em;
    }}

    /* ===== Section Panels ===== */
    .section-title {{
        color: {colors['text_primary']};
        font-weight: 600;
        font-size: 1.05rem;
        margin: 0.5rem 0 0.75rem;
    }}

    /* ===== Message Banner ===== */
    .message-banner {{
        background: {colors['banner_bg']};
        border: 1px solid {colors['banner_border']};
        color: {colors['banner_text']};
        padding: 0.5rem 1rem;
        border-radius: 0.375rem;
        margin-bottom: 1rem;
    }}

    .message-banner.error {{
        background: {colors['error_bg']};
        border-color: {colors['error_border']};
    }}

    /* ===== KPI Cards ===== */
    .kpi-card {{
        background: {colors['card_bg']};
        border: 1px solid {colors['panel_border']};
        border-radius: 0.75rem;
        padding: 1.25rem;
    }}

    .kpi-label {{
        color: {colors['text_secondary']};
        font-size: 0.875rem;
    }}

    .kpi-value {{
        color: {colors['text_primary']};
        font-size: 1.875rem;
        font-weight: 700;
        margin-top: 0.25rem;
    }}

    /* ===== Data Tables ===== */
    .data-table {{
        width: 100%;
        border-collapse: collapse;
        font-size: 0.875rem;
        text-align: left;
    }}

    .data-table th {{
        color: {colors['text_secondary']};
        font-weight: 500;
        padding: 0.5rem 0.75rem;
    }}

    .data-table td {{
        color: {colors['table_text']};
        padding: 0.5rem 0.75rem;
        border-top: 1px solid {colors['panel_border']};
    }}

    .data-table td.empty {{
        text-align: center;
        color: {colors['muted_text']};
        padding: 1.5rem 0.75rem;
        border-top: none;
    }}

    /* ===== Loading Indicator ===== */
    .loading-indicator {{
        position: fixed;
        bottom: 1rem;
        right: 1rem;
        background: {colors['card_bg']};
        color: {colors['banner_text']};
        padding: 0.5rem 0.75rem;
        border-radius: 0.375rem;
        z-index: 50;
    }}
    </style>
    """
