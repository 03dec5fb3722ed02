import asyncio

from loan_tracker.table import Column, build_table, render_table_html
from loan_tracker.views import CUSTOMER_COLUMNS, LOAN_COLUMNS

COLUMNS = [Column("name", "Name"), Column("email", "Email"), Column("commission_rate", "Rate (%)")]


def test_empty_rows_render_one_placeholder_row():
    model = build_table([], COLUMNS, "No partners yet")

    assert model.placeholder is True
    assert model.rows == [["No partners yet"]]

    markup = render_table_html(model)
    assert markup.count("<tr>") == 2
    assert '<td class="empty" colspan="3">No partners yet</td>' in markup


def test_rows_have_one_cell_per_column():
    rows = [{"name": "Acme", "email": "a@x.io", "commission_rate": 5}, {"name": "Beta"}]

    model = build_table(rows, COLUMNS, "No partners yet")

    assert model.placeholder is False
    assert model.headers == ["Name", "Email", "Rate (%)"]
    assert model.rows == [["Acme", "a@x.io", "5"], ["Beta", "", ""]]
    assert render_table_html(model).count("<td>") == 6


def test_render_function_receives_value_and_record():
    columns = [Column("amount", "Amount", render=lambda v, r: f"{r['status']}:{v}")]

    model = build_table([{"amount": 10, "status": "funded"}], columns, "none")

    assert model.rows == [["funded:10"]]


def test_cells_are_html_escaped():
    model = build_table([{"name": "<b>Acme</b>"}], [Column("name", "Name")], "none")

    assert "&lt;b&gt;Acme&lt;/b&gt;" in render_table_html(model)


def test_loan_columns_format_currency():
    model = build_table(
        [{"status": "funded", "amount": 12500, "commission_amount": None,
          "application_date": "2024-01-02", "funded_date": None}],
        LOAN_COLUMNS,
        "No loans yet",
    )

    assert model.rows == [["funded", "$12,500", "$0", "2024-01-02", ""]]


def test_created_customer_appears_in_customers_table(backend, store):
    asyncio.run(store.create_entity("/api/customers", {
        "first_name": "Ann", "last_name": "Lee", "email": "ann@example.com", "phone": "555-0100",
    }))

    model = build_table(store.snapshot().customers, CUSTOMER_COLUMNS, "No customers yet")

    assert model.rows == [["Ann", "Lee", "ann@example.com", "555-0100"]]
