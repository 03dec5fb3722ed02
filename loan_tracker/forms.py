"""
Form drafts for creating customers, partners, and loans.

Each form keeps its own mutable draft, seeded from the draft model defaults
and updated one field at a time as the user types. Submitting hands a copy of
the draft to the caller's callback; the draft is kept afterwards so a failed
save can be retried as-is.
"""

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from pydantic import BaseModel

from loan_tracker.config import CUSTOMERS_PATH, PARTNERS_PATH, LOANS_PATH
from loan_tracker.models import (
    LOAN_STATUSES,
    CustomerDraft,
    LoanDraft,
    PartnerDraft,
    customer_display_name,
    partner_display_name,
)

SubmitCallback = Callable[[Dict[str, Any]], Any]

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(raw: Any) -> Optional[float]:
    """Read the leading number from user input, like a browser's parseFloat.

    Returns None when the input does not start with a number or overflows
    to infinity.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        number = float(raw)
    else:
        match = _LEADING_NUMBER.match(str(raw or ""))
        if not match:
            return None
        number = float(match.group(0))
    return number if math.isfinite(number) else None


def number_or_zero(raw: Any) -> float:
    return parse_number(raw) or 0


def number_or_blank(raw: Any):
    return parse_number(raw) or ""


def text_value(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, date):
        return raw.isoformat()
    return str(raw)


@dataclass(frozen=True)
class Field:
    """A form input: draft key, label, widget kind."""
    key: str
    label: str
    kind: str = "text"


class EntityForm:
    """Base class for a create form bound to one collection path."""

    draft_model: Type[BaseModel]
    path: str
    submit_label: str
    fields: Tuple[Field, ...] = ()
    coercers: Mapping[str, Callable[[Any], Any]] = {}

    def __init__(self, on_submit: Optional[SubmitCallback] = None):
        self.on_submit = on_submit
        self.draft: Dict[str, Any] = self.draft_model().model_dump()

    def update(self, key: str, raw: Any) -> None:
        """Store one field from user input, applying its coercion."""
        if key not in self.draft:
            raise KeyError(f"Unknown field for {type(self).__name__}: {key}")
        coerce = self.coercers.get(key)
        self.draft[key] = coerce(raw) if coerce else raw

    def payload(self) -> Dict[str, Any]:
        return dict(self.draft)

    def submit(self, on_submit: Optional[SubmitCallback] = None) -> Any:
        """Pass the current draft to the submission callback."""
        callback = on_submit or self.on_submit
        if callback is None:
            raise ValueError(f"{type(self).__name__} has no submission callback")
        return callback(self.payload())


class CustomerForm(EntityForm):
    draft_model = CustomerDraft
    path = CUSTOMERS_PATH
    submit_label = "Save Customer"
    fields = (
        Field("first_name", "First name"),
        Field("last_name", "Last name"),
        Field("email", "Email"),
        Field("phone", "Phone"),
        Field("address", "Address"),
        Field("city", "City"),
        Field("state", "State"),
        Field("postal_code", "Postal Code"),
    )
    coercers = {f.key: text_value for f in fields}


class PartnerForm(EntityForm):
    draft_model = PartnerDraft
    path = PARTNERS_PATH
    submit_label = "Save Partner"
    fields = (
        Field("name", "Business/Agent Name"),
        Field("contact_name", "Contact Name"),
        Field("email", "Email"),
        Field("phone", "Phone"),
        Field("commission_rate", "Commission Rate (%)", kind="number"),
    )
    coercers = {
        "name": text_value,
        "contact_name": text_value,
        "email": text_value,
        "phone": text_value,
        "commission_rate": number_or_zero,
    }


class LoanForm(EntityForm):
    draft_model = LoanDraft
    path = LOANS_PATH
    submit_label = "Save Loan"
    fields = (
        Field("customer_id", "Customer", kind="select"),
        Field("partner_id", "Referral Partner", kind="select"),
        Field("amount", "Amount", kind="number"),
        Field("status", "Status", kind="select"),
        Field("application_date", "Application Date", kind="date"),
        Field("funded_date", "Funded Date", kind="date"),
    )
    coercers = {
        "amount": number_or_blank,
        "status": text_value,
        "application_date": text_value,
        "funded_date": text_value,
    }
    statuses = LOAN_STATUSES

    @staticmethod
    def customer_options(customers: Sequence[Mapping[str, Any]]) -> List[Tuple[Any, str]]:
        """Selector entries for the customer field; None means not chosen yet."""
        options = [(None, "Select customer")]
        options.extend((c.get("id"), customer_display_name(c)) for c in customers)
        return options

    @staticmethod
    def partner_options(partners: Sequence[Mapping[str, Any]]) -> List[Tuple[Any, str]]:
        """Selector entries for the optional partner reference."""
        options = [(None, "None")]
        options.extend((p.get("id"), partner_display_name(p)) for p in partners)
        return options
