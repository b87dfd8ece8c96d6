"""Tests for the command-line entry point."""

import sys

import pytest

from backend import cli
from backend.services.csv_export import CSV_HEADERS

from tests.helpers import WALLET


class TestCli:
    def test_summary_prints_metrics(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["wallet-analytics", "summary", WALLET])
        cli.main()
        out = capsys.readouterr().out
        assert f"Wallet:        {WALLET}" in out
        assert "Trades:        250" in out
        assert "Win rate:" in out

    def test_export_csv_writes_header(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["wallet-analytics", "export-csv", WALLET, "SOL"])
        cli.main()
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == ",".join(CSV_HEADERS)
        assert len(lines) > 1

    def test_invalid_address_exits(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["wallet-analytics", "summary", "not-a-wallet"])
        with pytest.raises(SystemExit) as exc:
            cli.main()
        assert exc.value.code == 1
        assert "Invalid Solana wallet address" in capsys.readouterr().out

    def test_unknown_command_prints_usage(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["wallet-analytics", "frobnicate", WALLET])
        with pytest.raises(SystemExit):
            cli.main()
        assert "Commands: summary, export-csv" in capsys.readouterr().out
