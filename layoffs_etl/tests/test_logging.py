"""Logging configuration tests"""

import pytest

from layoffs_etl.core.logging import configure_logging, get_logger, resolve_level


class TestLogging:
    """Test log level normalization and logger binding"""

    @pytest.mark.parametrize(
        "raw,expected",
        [("warn", "WARNING"), ("FATAL", "CRITICAL"), (" debug ", "DEBUG"), ("verbose", "INFO"), (None, "INFO")],
    )
    def test_resolve_level(self, raw, expected):
        assert resolve_level(raw) == expected

    def test_configure_is_idempotent(self):
        configure_logging()
        configure_logging()

    def test_bound_name(self):
        log = get_logger("cleaning.test")
        log.info("bound logger works")
