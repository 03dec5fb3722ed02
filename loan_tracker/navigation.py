"""Tab navigation state."""

from typing import Tuple

TABS: Tuple[Tuple[str, str], ...] = (
    ("dashboard", "Dashboard"),
    ("customers", "Customers"),
    ("partners", "Partners"),
    ("loans", "Loans"),
)

TAB_KEYS = tuple(key for key, _ in TABS)

DEFAULT_TAB = "dashboard"


class Navigation:
    """Tracks which tab is showing. Switching tabs never touches the network."""

    def __init__(self, current: str = DEFAULT_TAB):
        self.current = DEFAULT_TAB
        self.select(current)

    def select(self, tab: str) -> str:
        if tab not in TAB_KEYS:
            raise ValueError(f"Unknown tab: {tab!r}")
        self.current = tab
        return tab

    def is_current(self, tab: str) -> bool:
        return self.current == tab
