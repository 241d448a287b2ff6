import os

import pytest

from loanquote.cli import main

MARKET = os.path.join(os.path.dirname(__file__), "data", "market.csv")


def test_cli_prints_quote(capsys):
    assert main([MARKET, "1000"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Requested amount: £1000"
    assert lines[1] == "Rate: 7.0%"
    assert lines[2].startswith("Monthly repayment: £")
    assert lines[3].startswith("Total repayment: £")


def test_cli_schedule(capsys):
    assert main([MARKET, "1000", "--months", "12", "--schedule"]) == 0

    out = capsys.readouterr().out
    assert "Month" in out
    # quote (4) + blank + header + 12 rows
    assert len(out.splitlines()) == 18


def test_cli_bad_amount(capsys):
    assert main([MARKET, "lots"]) == 1
    assert capsys.readouterr().out.strip() == "The amount lots is not a valid integer"


def test_cli_reports_quote_errors(capsys):
    assert main([MARKET, "999"]) == 1
    assert "too low" in capsys.readouterr().out

    assert main([MARKET, "15000"]) == 1
    assert capsys.readouterr().out.strip() == "It is not possible to provide a quote at this time."


def test_cli_missing_file(capsys, tmp_path):
    assert main([str(tmp_path / "nope.csv"), "1000"]) == 1
    assert "Unable to read lender file" in capsys.readouterr().out


def test_cli_usage_error():
    with pytest.raises(SystemExit) as exc:
        main([MARKET])
    assert exc.value.code == 2
