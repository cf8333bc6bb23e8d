"""Unit tests for table search, filtering, sorting and pagination"""

import pytest

from cashflow_risk.domain.models import Decision, RiskTier
from cashflow_risk.domain.processing import process_records
from cashflow_risk.presentation.table import TableState, apply_table_state, pagination_items


@pytest.fixture
def records(make_customer):
    return process_records(
        [
            make_customer(80, 80, 80, 80, customer_id="CUST-0003"),
            make_customer(60, 60, 60, 60, customer_id="cust-0001"),
            make_customer(10, 80, 80, 80, customer_id="CUST-0002"),
            make_customer(40, 40, 40, 40, customer_id="VIP-0100"),
        ]
    )


def ids(page):
    return [r.customer_id for r in page.rows]


def test_default_state_shows_everything_in_input_order(records):
    page = apply_table_state(records, TableState(items_per_page=15))

    assert ids(page) == ["CUST-0003", "cust-0001", "CUST-0002", "VIP-0100"]
    assert (page.start, page.end, page.total, page.total_pages) == (1, 4, 4, 1)


def test_search_is_case_insensitive(records):
    state = TableState()
    state.set_search("CUST-000")

    assert ids(apply_table_state(records, state)) == ["CUST-0003", "cust-0001", "CUST-0002"]


def test_risk_filter_matches_overall_risk_level(records):
    state = TableState()
    state.set_risk_filter(RiskTier.LOW)

    page = apply_table_state(records, state)

    assert ids(page) == ["CUST-0003"]
    assert all(r.risk_level is RiskTier.LOW for r in page.rows)


def test_filter_changes_reset_page():
    state = TableState(page=3)
    state.set_search("x")
    assert state.page == 1

    state.go_to(4)
    state.set_risk_filter(None)
    assert state.page == 1


def test_toggle_sort_flips_direction_on_same_column():
    state = TableState()
    state.toggle_sort("combined_score")
    assert (state.sort_column, state.sort_direction) == ("combined_score", "asc")

    state.toggle_sort("combined_score")
    assert state.sort_direction == "desc"

    state.toggle_sort("customer_id")
    assert (state.sort_column, state.sort_direction) == ("customer_id", "asc")


def test_toggle_sort_rejects_unknown_column():
    with pytest.raises(ValueError):
        TableState().toggle_sort("favourite_colour")


def test_sort_strings_case_insensitive(records):
    state = TableState()
    state.toggle_sort("customer_id")

    assert ids(apply_table_state(records, state)) == ["cust-0001", "CUST-0002", "CUST-0003", "VIP-0100"]


def test_sort_numbers_descending(records):
    state = TableState()
    state.toggle_sort("combined_score")
    state.toggle_sort("combined_score")

    scores = [r.combined_score for r in apply_table_state(records, state).rows]
    assert scores == sorted(scores, reverse=True)


def test_sort_by_decision_label(records):
    state = TableState()
    state.toggle_sort("decision")

    decisions = [r.decision for r in apply_table_state(records, state).rows]
    assert decisions[0] is Decision.AUTO_APPROVE
    assert decisions[-1] is Decision.MANUAL_REVIEW


def test_pagination_slices_pages(make_portfolio):
    portfolio = make_portfolio((32, (80, 80, 80, 80)))
    state = TableState(items_per_page=15)

    state.go_to(3)
    page = apply_table_state(portfolio, state)

    assert len(page.rows) == 2
    assert (page.start, page.end, page.total, page.total_pages) == (31, 32, 32, 3)


def test_page_past_the_end_is_empty(records):
    state = TableState(items_per_page=15)
    state.go_to(9)

    page = apply_table_state(records, state)

    assert page.rows == []
    assert (page.start, page.end) == (0, 0)


def test_pagination_items_with_ellipses():
    labels = [b.label for b in pagination_items(5, 10)]
    assert labels == ["‹", "1", "...", "4", "5", "6", "...", "10", "›"]

    buttons = pagination_items(5, 10)
    assert [b.page for b in buttons if b.active] == [5]


def test_pagination_items_edges():
    first = pagination_items(1, 10)
    assert [b.label for b in first] == ["‹", "1", "2", "...", "10", "›"]
    assert first[0].disabled and not first[-1].disabled

    last = pagination_items(10, 10)
    assert [b.label for b in last] == ["‹", "1", "...", "9", "10", "›"]
    assert last[-1].disabled

    assert pagination_items(1, 1) == []
