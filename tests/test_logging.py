"""Tests for logging setup."""

import logging
import pytest
import structlog
from structlog.testing import capture_logs
from arrayx import configure_logging, get_logger, sort_with, ComparatorError


class TestLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_configure_verbose(self):
        configure_logging(verbose=True)
        assert structlog.is_configured()
        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(logging.DEBUG)

    def test_configure_default_level(self):
        configure_logging()
        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(logging.INFO)
        assert config["context_class"] is dict

    def test_configured_logger_renders_events(self, capsys):
        configure_logging()
        log = get_logger("arrayx.test")
        log.info("grid.built", rows=2)
        log.debug("grid.cell", row=0)
        out = capsys.readouterr().out
        assert "grid.built" in out
        assert "rows=2" in out
        assert "grid.cell" not in out

    def test_get_logger(self):
        assert get_logger("arrayx.test") is not None
        assert get_logger() is not None


class TestLibraryIsSilent:
    def test_bad_comparator_writes_nothing(self, capsys):
        with pytest.raises(ComparatorError):
            sort_with(lambda a, b: "less", [1, 2])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_bad_comparator_emits_no_events(self):
        with capture_logs() as logs:
            with pytest.raises(ComparatorError):
                sort_with(lambda a, b: "less", [1, 2])
        assert logs == []

    def test_sorting_emits_no_events(self):
        with capture_logs() as logs:
            sort_with(lambda a, b: a - b, [3, 1, 2])
        assert logs == []
