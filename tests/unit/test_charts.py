"""Unit tests for chart data series"""

import pytest

from cashflow_risk.domain.exceptions import UnknownCustomerError
from cashflow_risk.presentation.charts import (
    COLORS,
    criteria_breakdown,
    decision_distribution,
    heatmap_matrix,
    radar_profile,
    score_histogram,
    threshold_markers,
)


def test_decision_distribution(make_portfolio):
    records = make_portfolio((3, (80, 80, 80, 80)), (1, (10, 80, 80, 80)))

    chart = decision_distribution(records)

    assert chart["labels"] == ["Auto Approve", "Manual Review", "Elevated Risk", "Auto Deny"]
    assert chart["values"] == [3, 0, 0, 1]
    assert chart["colors"][0] == COLORS["low"]
    assert chart["colors"][3] == COLORS["high"]


def test_criteria_breakdown_counts_each_tier(make_portfolio):
    records = make_portfolio((2, (80, 60, 40, 10)), (1, (80, 80, 80, 80)))

    traces = criteria_breakdown(records)

    assert [t.name for t in traces] == ["Low Risk", "Moderate Risk", "Elevated Risk", "High Risk"]
    assert traces[0].labels == ["Transaction", "Affordability", "Employment", "Behavior"]
    assert traces[0].values == [3, 1, 1, 1]
    assert traces[1].values == [0, 2, 0, 0]
    assert traces[2].values == [0, 0, 2, 0]
    assert traces[3].values == [0, 0, 0, 2]
    # every customer lands in exactly one tier per criterion
    assert [sum(col) for col in zip(*(t.values for t in traces))] == [3, 3, 3, 3]


def test_score_histogram(sample_portfolio):
    histogram = score_histogram(sample_portfolio, bins=20)

    assert sum(histogram.counts) == len(sample_portfolio)
    assert len(histogram.edges) == 21
    assert histogram.edges[0] == 0 and histogram.edges[-1] == 100


def test_score_histogram_top_score_in_last_bin(make_portfolio):
    histogram = score_histogram(make_portfolio((1, (100, 100, 100, 100))), bins=20)
    assert histogram.counts[-1] == 1


def test_score_histogram_explicit_zero_bins_is_not_defaulted(make_portfolio):
    with pytest.raises(ValueError):
        score_histogram(make_portfolio((1, (80, 80, 80, 80))), bins=0)


def test_radar_profile_portfolio_average(make_portfolio):
    records = make_portfolio((1, (80, 60, 40, 20)), (1, (60, 40, 20, 0)))

    radar = radar_profile(records)

    assert radar.name == "Portfolio Average"
    assert radar.r == [70, 50, 30, 10, 70]
    assert radar.theta[0] == radar.theta[-1] == "Transaction"


def test_radar_profile_single_customer(make_portfolio):
    records = make_portfolio((2, (80, 60, 40, 20)))

    radar = radar_profile(records, "CUST-0002")

    assert radar.name == "CUST-0002"
    assert radar.r == [80, 60, 40, 20, 80]


def test_radar_profile_unknown_customer(make_portfolio):
    with pytest.raises(UnknownCustomerError):
        radar_profile(make_portfolio((1, (80, 80, 80, 80))), "CUST-9999")


def test_heatmap_matrix_is_limited(make_portfolio):
    records = make_portfolio((60, (80, 60, 40, 20)))

    heatmap = heatmap_matrix(records, limit=50)

    assert len(heatmap.z) == 50
    assert heatmap.z[0] == [80, 60, 40, 20]
    assert heatmap.y[-1] == "CUST-0050"


def test_heatmap_matrix_explicit_zero_limit(make_portfolio):
    heatmap = heatmap_matrix(make_portfolio((3, (80, 60, 40, 20))), limit=0)

    assert heatmap.z == [] and heatmap.y == []


def test_threshold_markers():
    assert [(m.score, m.label) for m in threshold_markers()] == [
        (70, "Low"),
        (50, "Moderate"),
        (35, "Elevated"),
    ]
