"""Unit tests for cash-flow projection"""

import pytest
from implied_growth.domain.projection import find_payback_year, project_cash_flows


def test_project_cash_flows_length_and_years():
    """Test default horizon yields years 0..10"""
    cash_flows = project_cash_flows(100, 5, 0.02)

    assert len(cash_flows) == 11
    assert [cf.year for cf in cash_flows] == list(range(11))


def test_project_cash_flows_initial_investment():
    """Test year 0 carries only the negative investment"""
    year0 = project_cash_flows(100, 5, 0.02)[0]

    assert year0.dividend == 0
    assert year0.investment == -100
    assert year0.total_cash_flow == -100
    assert year0.cumulative_cash_flow == -100


def test_project_cash_flows_dividend_growth():
    """Test D_t = D0 * (1 + g)^t"""
    g = 2 / 105
    cash_flows = project_cash_flows(100, 5, g)

    for cf in cash_flows[1:]:
        assert cf.dividend == pytest.approx(5 * (1 + g) ** cf.year, rel=1e-9)
        assert cf.investment == 0


def test_project_cash_flows_totals_and_cumulative():
    """Test total = dividend + investment and running cumulative sum"""
    cash_flows = project_cash_flows(100, 5, 0.02, horizon_years=2)

    assert cash_flows[1].dividend == pytest.approx(5.1)
    assert cash_flows[2].dividend == pytest.approx(5.202)
    assert cash_flows[2].cumulative_cash_flow == pytest.approx(-89.698)

    running = 0.0
    for cf in cash_flows:
        assert cf.total_cash_flow == pytest.approx(cf.dividend + cf.investment)
        running += cf.total_cash_flow
        assert cf.cumulative_cash_flow == pytest.approx(running)


def test_project_cash_flows_final_cumulative():
    cash_flows = project_cash_flows(54.56, 3.60, 0.01)
    expected = -54.56 + sum(cf.dividend for cf in cash_flows[1:])
    assert cash_flows[-1].cumulative_cash_flow == pytest.approx(expected)


def test_project_cash_flows_continues_past_break_even():
    """Test no early termination once the cumulative total turns positive"""
    cash_flows = project_cash_flows(10, 5, 0.0, horizon_years=5)

    assert len(cash_flows) == 6
    assert cash_flows[-1].cumulative_cash_flow == pytest.approx(15)


def test_project_cash_flows_zero_horizon():
    cash_flows = project_cash_flows(100, 5, 0.02, horizon_years=0)
    assert len(cash_flows) == 1


def test_project_cash_flows_negative_horizon():
    with pytest.raises(ValueError):
        project_cash_flows(100, 5, 0.02, horizon_years=-1)


def test_find_payback_year():
    assert find_payback_year(project_cash_flows(10, 5, 0.0)) == 2  # -10, -5, 0
    assert find_payback_year(project_cash_flows(100, 5, 0.02)) is None
