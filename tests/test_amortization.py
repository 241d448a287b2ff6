import pytest

from loanquote.utils.amortization import amortization_schedule, fmt, monthly_payment, sum_schedules


def test_monthly_payment_matches_pmt():
    # 1000 * ((0.051/12)*(1+(0.051/12))^36)/((1+(0.051/12))^36-1)
    assert monthly_payment(1000, 0.051, 36) == pytest.approx(30.015815509, abs=1e-6)
    assert monthly_payment(200, 0.069, 36) == pytest.approx(6.1662791696, abs=1e-6)


def test_monthly_payment_zero_rate():
    assert monthly_payment(1200, 0.0, 36) == pytest.approx(1200 / 36)


def test_monthly_payment_custom_compounding():
    # annual compounding, one period: principal plus a year of interest
    assert monthly_payment(1000, 0.05, 1, compound_frequency=1.0) == pytest.approx(1050.0)


def test_fmt_half_up():
    assert fmt(2.675) == 2.68
    assert fmt(5.3999999999999995, "0.1") == 5.4


def test_schedule_empty_for_no_principal():
    assert amortization_schedule(0, 0.05, 12) == {"payment": 0.0, "schedule": []}
    assert amortization_schedule(1000, 0.05, 0) == {"payment": 0.0, "schedule": []}


def test_schedule_final_row_clears_balance():
    out = amortization_schedule(1000, 0.051, 36)
    rows = out["schedule"]

    assert out["payment"] == 30.02
    assert len(rows) == 36
    assert rows[0]["interest"] == 4.25
    assert rows[0]["principal"] == pytest.approx(25.77)
    assert rows[-1]["ending_balance"] == 0.0


def test_sum_schedules_pointwise():
    a = amortization_schedule(1000, 0.051, 12)["schedule"]
    b = amortization_schedule(200, 0.069, 12)["schedule"]
    total = sum_schedules([a, b])

    assert len(total) == 12
    assert total[0]["opening_balance"] == 1200.0
    assert total[0]["payment"] == pytest.approx(a[0]["payment"] + b[0]["payment"])
    assert sum_schedules([]) == []


def test_monthly_payment_very_long_term_tends_to_interest_only():
    # (1+r)^n would overflow here; the payment converges on P * r
    assert monthly_payment(1000, 0.051, 200000) == pytest.approx(1000 * 0.051 / 12)


def test_schedule_uses_given_compounding():
    out = amortization_schedule(1000, 0.12, 12, compound_frequency=4.0)
    rows = out["schedule"]

    assert out["payment"] == fmt(monthly_payment(1000, 0.12, 12, compound_frequency=4.0))
    assert rows[0]["interest"] == 30.0
    assert rows[-1]["ending_balance"] == 0.0
