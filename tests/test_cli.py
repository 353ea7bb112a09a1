"""Tests for the linkcheck CLI."""

from unittest.mock import MagicMock, patch

import httpx
from typer.testing import CliRunner

from cli.main import app
from linkcheck.checker.fetcher import FetchError
from linkcheck.checker.models import Accessible, BadStatus, Malformed, TimedOut

runner = CliRunner()


def _prober_returning(outcome):
    prober = MagicMock()
    prober.probe.return_value = outcome
    return prober


def test_probe_accessible():
    outcome = Accessible("http://example.com/")
    with patch("cli.main.Prober", return_value=_prober_returning(outcome)) as mock_cls:
        result = runner.invoke(app, ["probe", "--domain", "example.com", "--path", "/"])

    assert result.exit_code == 0
    assert "!! http://example.com/" in result.stdout
    mock_cls.assert_called_once_with(timeout=None)


def test_probe_failure_exits_non_zero():
    outcome = TimedOut("http://example.com/slow")
    with patch("cli.main.Prober", return_value=_prober_returning(outcome)) as mock_cls:
        result = runner.invoke(
            app, ["probe", "--domain", "example.com", "--path", "/slow", "--timeout", "2.5"]
        )

    assert result.exit_code == 1
    assert "!! http://example.com/slow (timed out)" in result.stdout
    mock_cls.assert_called_once_with(timeout=2.5)


def test_probe_malformed_needs_no_network():
    result = runner.invoke(app, ["probe", "--domain", "example.com", "--path", "://bad::url"])

    assert result.exit_code == 1
    assert "!! ://bad::url (malformed)" in result.stdout


def test_links_prints_one_per_line():
    with patch("cli.main.fetch_and_extract", return_value=["/a", "/b", "/a"]):
        result = runner.invoke(app, ["links", "--url", "https://example.com/"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["/a", "/b", "/a"]


def test_links_fetch_error():
    error = FetchError("https://down.example.com/", httpx.ConnectError("refused"))
    with patch("cli.main.fetch_and_extract", side_effect=error):
        result = runner.invoke(app, ["links", "--url", "https://down.example.com/"])

    assert result.exit_code == 1
    assert "could not fetch https://down.example.com/" in result.output


def test_check_reports_outcomes_and_summary():
    results = [
        ("/ok", Accessible("https://example.com/ok")),
        ("/gone", BadStatus("https://example.com/gone", 404)),
        ("::", Malformed("::")),
    ]
    with patch("cli.main.check_page", return_value=results):
        result = runner.invoke(app, ["check", "--url", "https://example.com/"])

    assert result.exit_code == 1
    assert "!! https://example.com/ok" in result.stdout
    assert "!! https://example.com/gone (404)" in result.stdout
    assert "!! :: (malformed)" in result.stdout
    assert "3 link(s) checked, 2 broken." in result.stdout


def test_check_broken_only_hides_accessible_links():
    results = [
        ("/ok", Accessible("https://example.com/ok")),
        ("/gone", BadStatus("https://example.com/gone", 404)),
    ]
    with patch("cli.main.check_page", return_value=results):
        result = runner.invoke(app, ["check", "--url", "https://example.com/", "--broken-only"])

    assert "!! https://example.com/ok\n" not in result.stdout
    assert "!! https://example.com/gone (404)" in result.stdout


def test_check_all_accessible_exits_zero():
    results = [("/ok", Accessible("https://example.com/ok"))]
    with patch("cli.main.check_page", return_value=results):
        result = runner.invoke(app, ["--verbose", "check", "--url", "https://example.com/"])

    assert result.exit_code == 0
    assert "1 link(s) checked, 0 broken." in result.stdout
