from loan_tracker.dashboard import (
    DashboardAggregator,
    DashboardTotals,
    calculate_dashboard_totals,
    calculate_status_counts,
    format_currency,
)


def test_empty_loans_yield_zero_totals():
    assert calculate_dashboard_totals([]) == DashboardTotals(0, 0, 0)


def test_only_funded_loans_are_counted():
    loans = [
        {"status": "funded", "amount": 1000, "commission_amount": 50},
        {"status": "funded", "amount": 2500.5, "commission_amount": 125},
        {"status": "approved", "amount": 9999, "commission_amount": 500},
        {"status": "closed", "amount": 400},
    ]

    totals = calculate_dashboard_totals(loans)

    assert totals.funded_count == 2
    assert totals.funded_amount == 3500.5
    assert totals.commission == 175


def test_missing_or_null_amounts_count_as_zero():
    loans = [
        {"status": "funded"},
        {"status": "funded", "amount": None, "commission_amount": None},
        {"status": "funded", "amount": 300},
    ]

    totals = calculate_dashboard_totals(loans)

    assert totals == DashboardTotals(funded_count=3, funded_amount=300, commission=0)


def test_aggregator_recomputes_only_for_a_new_collection():
    aggregator = DashboardAggregator()
    loans = ({"status": "funded", "amount": 10},)

    first = aggregator.totals(loans)
    assert aggregator.totals(loans) is first

    replaced = loans + ({"status": "funded", "amount": 5},)
    assert aggregator.totals(replaced).funded_amount == 15


def test_status_counts_include_every_status():
    counts = calculate_status_counts([{"status": "funded"}, {"status": "funded"}, {"status": "applied"}])

    assert counts == {"applied": 1, "approved": 0, "funded": 2, "rejected": 0, "closed": 0}


def test_format_currency():
    assert format_currency(1234567) == "$1,234,567"
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(None) == "$0"
