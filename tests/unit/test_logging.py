"""Tests for structlog output of library operations."""

import pytest
import structlog
from structlog.testing import capture_logs

from v2lib.logging import configure_logging
from v2lib.routing.multihop import get_amounts_out
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C


class TestLogging:
    def test_quote_emits_debug_events(self, reserve_source, factory):
        with capture_logs() as logs:
            get_amounts_out(reserve_source, factory, 100, [TOKEN_A, TOKEN_B, TOKEN_C])

        events = [entry["event"] for entry in logs]
        assert events.count("reserves_fetched") == 2
        assert events.count("hop_quoted") == 2
        hop_logs = [entry for entry in logs if entry["event"] == "hop_quoted"]
        assert [entry["amount_out"] for entry in hop_logs] == [90, 82]
        assert all(entry["log_level"] == "debug" for entry in hop_logs)

    def test_pair_address_derived_once_per_hop(self, reserve_source, factory):
        with capture_logs() as logs:
            get_amounts_out(reserve_source, factory, 100, [TOKEN_A, TOKEN_B, TOKEN_C])

        events = [entry["event"] for entry in logs]
        assert events.count("pair_address_computed") == 2


class TestConfigureLogging:
    """Tests for the level filter installed by configure_logging."""

    @pytest.fixture(autouse=True)
    def _reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_default_drops_debug(self, reserve_source, factory):
        configure_logging()
        with capture_logs() as logs:
            get_amounts_out(reserve_source, factory, 100, [TOKEN_A, TOKEN_B])
            structlog.get_logger().info("quote_done")

        assert [entry["event"] for entry in logs] == ["quote_done"]

    def test_verbose_keeps_debug(self, reserve_source, factory):
        configure_logging(verbose=True)
        with capture_logs() as logs:
            get_amounts_out(reserve_source, factory, 100, [TOKEN_A, TOKEN_B])

        events = [entry["event"] for entry in logs]
        assert "reserves_fetched" in events
        assert "hop_quoted" in events
