import asyncio
from datetime import date

import pytest

from loan_tracker.forms import CustomerForm, LoanForm, PartnerForm, parse_number


@pytest.mark.parametrize("raw, expected", [
    ("12", 12.0),
    ("  3.5", 3.5),
    ("7.25%", 7.25),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("1e999", None),
    (float("inf"), None),
    ("abc", None),
    ("", None),
    (None, None),
    (4, 4.0),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_partner_without_rate_submits_default_rate():
    sent = []
    form = PartnerForm(on_submit=sent.append)
    form.update("name", "Acme Referrals")

    form.submit()

    assert sent == [{
        "name": "Acme Referrals",
        "contact_name": "",
        "email": "",
        "phone": "",
        "commission_rate": 5,
    }]


def test_partner_rate_coercion():
    form = PartnerForm()

    form.update("commission_rate", "7.5")
    assert form.draft["commission_rate"] == 7.5

    form.update("commission_rate", "not a number")
    assert form.draft["commission_rate"] == 0


def test_loan_amount_coercion_blanks_invalid_input():
    form = LoanForm()

    form.update("amount", "25000")
    assert form.draft["amount"] == 25000.0

    form.update("amount", "oops")
    assert form.draft["amount"] == ""

    form.update("amount", "0")
    assert form.draft["amount"] == ""


def test_loan_defaults():
    form = LoanForm()

    assert form.payload() == {
        "customer_id": None,
        "partner_id": None,
        "amount": "",
        "status": "applied",
        "application_date": "",
        "funded_date": "",
    }


def test_loan_dates_are_stored_as_iso_strings():
    form = LoanForm()

    form.update("application_date", date(2024, 3, 1))
    form.update("funded_date", None)

    assert form.draft["application_date"] == "2024-03-01"
    assert form.draft["funded_date"] == ""


def test_draft_is_kept_after_submit():
    form = CustomerForm(on_submit=lambda data: None)
    form.update("first_name", "Ann")

    form.submit()

    assert form.draft["first_name"] == "Ann"


def test_submit_sends_a_copy_of_the_draft():
    sent = []
    form = CustomerForm(on_submit=sent.append)
    form.submit()
    form.update("email", "ann@example.com")

    assert sent[0]["email"] == ""


def test_unknown_field_rejected():
    with pytest.raises(KeyError):
        CustomerForm().update("id", 5)


def test_submit_without_callback_rejected():
    with pytest.raises(ValueError):
        CustomerForm().submit()


def test_loan_selector_options():
    customers = [{"id": 1, "first_name": "Ann", "last_name": "Lee"}]
    partners = [{"id": 4, "name": "Acme"}]

    assert LoanForm.customer_options(customers) == [(None, "Select customer"), (1, "Ann Lee")]
    assert LoanForm.partner_options(partners) == [(None, "None"), (4, "Acme")]
    assert LoanForm.statuses == ("applied", "approved", "funded", "rejected", "closed")


def test_failed_submission_leaves_draft_for_retry(backend, store):
    backend.fail("POST", "/api/customers", status=400, body="email taken")
    form = CustomerForm(on_submit=lambda data: asyncio.run(store.create_entity(form.path, data)))
    form.update("email", "ann@example.com")

    assert form.submit() is False
    assert form.draft["email"] == "ann@example.com"

    del backend.failures[("POST", "/api/customers")]
    assert form.submit() is True
    assert backend.posted("/api/customers")[-1]["email"] == "ann@example.com"


def test_overflowing_numbers_are_treated_as_invalid(backend, store):
    partner = PartnerForm(on_submit=lambda data: asyncio.run(store.create_entity(partner.path, data)))
    partner.update("commission_rate", "1e999")
    assert partner.draft["commission_rate"] == 0

    loan = LoanForm()
    loan.update("amount", "9e400")
    assert loan.draft["amount"] == ""

    assert partner.submit() is True
    assert backend.posted("/api/partners")[-1]["commission_rate"] == 0
    assert store.snapshot().message == "Saved successfully"
