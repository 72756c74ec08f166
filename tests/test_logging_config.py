"""
Unit tests for configure_logging.
"""

import json
import logging

import pytest
import structlog

from src.infrastructure.observability.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_events_reach_stdlib_logging(self, caplog):
        with caplog.at_level(logging.INFO):
            configure_logging("INFO", "json")
            structlog.get_logger("market_data.gateway").info("Making api request", symbols=["AAPL"])

        records = [r for r in caplog.records if r.name == "market_data.gateway"]
        assert len(records) == 1
        event = json.loads(records[0].getMessage())
        assert event["event"] == "Making api request"
        assert event["symbols"] == ["AAPL"]
        assert event["level"] == "info"
        assert event["logger"] == "market_data.gateway"

    def test_level_filters_events(self, caplog):
        with caplog.at_level(logging.DEBUG):
            configure_logging("WARNING", "json")
            logger = structlog.get_logger("market_data.filtered")
            logger.info("dropped")
            logger.warning("kept")

        messages = [
            json.loads(r.getMessage())["event"]
            for r in caplog.records
            if r.name == "market_data.filtered"
        ]
        assert messages == ["kept"]
