"""
Tests for the post-deploy smoke test script
"""

from unittest.mock import MagicMock, patch

import pytest
import requests
from smoke_test import check_health, check_root, main, probe

ROOT_BODY = {
    "message": "Hello from DevOps Pipeline!",
    "version": "1.0.0",
    "timestamp": "2026-10-18T10:00:00.000Z",
    "environment": "production",
}


def health_body(uptime):
    return {"status": "healthy", "uptime": uptime, "memory": {"rss": 1024}}


def fake_response(body, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class TestChecks:
    """Tests for response checks."""

    def test_root_ok(self):
        """A correct / response has no problems."""
        assert check_root(200, ROOT_BODY) == []

    def test_root_wrong_status(self):
        """A non-200 / response is reported."""
        assert check_root(500, None) == ["/ returned 500"]

    def test_root_wrong_message(self):
        """A changed greeting is reported."""
        problems = check_root(200, {**ROOT_BODY, "message": "hi"})
        assert len(problems) == 1
        assert "message" in problems[0]

    def test_health_ok(self):
        """A correct /health response has no problems."""
        assert check_health(200, health_body(1.5), last_uptime=1.0) == []

    def test_health_uptime_backwards(self):
        """Uptime going backwards means the process restarted."""
        problems = check_health(200, health_body(0.5), last_uptime=10.0)
        assert len(problems) == 1
        assert "backwards" in problems[0]

    def test_health_empty_memory(self):
        """An empty memory snapshot is reported."""
        body = {**health_body(1.0), "memory": {}}
        assert check_health(200, body) == ["/health memory snapshot is empty"]


class TestProbe:
    """Tests for probe()."""

    def test_connection_error_returns_zero(self):
        """Connection failures report status 0."""
        with patch("smoke_test.requests.get", side_effect=requests.ConnectionError):
            code, body, _ = probe("http://localhost:3000", "/health")
        assert code == 0
        assert body is None


class TestMain:
    """Tests for the CLI entry point."""

    def test_pass_returns_zero(self, capsys):
        """Healthy responses exit 0."""
        responses = [
            fake_response(ROOT_BODY),
            fake_response(health_body(1.0)),
            fake_response(ROOT_BODY),
            fake_response(health_body(2.0)),
        ]
        with patch("smoke_test.requests.get", side_effect=responses) as mock_get:
            with patch("smoke_test.time.sleep"):
                assert main(["http://localhost:3000/", "--count", "2"]) == 0

        assert mock_get.call_args_list[0][0][0] == "http://localhost:3000/"
        assert mock_get.call_args_list[1][0][0] == "http://localhost:3000/health"
        assert "PASS" in capsys.readouterr().out

    def test_failure_returns_one(self, capsys):
        """Any failed probe exits 1."""
        responses = [fake_response(ROOT_BODY), fake_response(None, status_code=503)]
        with patch("smoke_test.requests.get", side_effect=responses):
            assert main(["--count", "1"]) == 1

        out = capsys.readouterr().out
        assert "/health returned 503" in out
        assert "FAIL" in out

    def test_count_must_be_positive(self):
        """--count 0 is rejected."""
        with pytest.raises(SystemExit):
            main(["--count", "0"])
