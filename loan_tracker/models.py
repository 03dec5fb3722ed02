"""
Pydantic models for the Loan Tracker frontend.
Defines the draft payloads submitted for customers, partners, and loans.
"""

from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel

LoanStatus = Literal["applied", "approved", "funded", "rejected", "closed"]

LOAN_STATUSES = ("applied", "approved", "funded", "rejected", "closed")

FUNDED = "funded"


class CustomerDraft(BaseModel):
    """Customer fields composed on the client before the backend assigns an id."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""


class PartnerDraft(BaseModel):
    """Referral partner fields; commission rate is a percentage."""
    name: str = ""
    contact_name: str = ""
    email: str = ""
    phone: str = ""
    commission_rate: float = 5


class LoanDraft(BaseModel):
    """Loan application fields.

    ``amount`` is an empty string until a positive number is entered, and the
    dates are ISO strings or empty.
    """
    customer_id: Optional[Any] = None
    partner_id: Optional[Any] = None
    amount: Union[float, str] = ""
    status: LoanStatus = "applied"
    application_date: str = ""
    funded_date: str = ""


def customer_display_name(customer: Mapping[str, Any]) -> str:
    """Compose a customer's display name from first and last name."""
    first = customer.get("first_name") or ""
    last = customer.get("last_name") or ""
    return f"{first} {last}".strip()


def partner_display_name(partner: Mapping[str, Any]) -> str:
    return str(partner.get("name") or "")
