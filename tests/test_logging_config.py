"""Tests for logging set up from the loaded configuration."""

import logging

import pytest
from rich.logging import RichHandler

from lineage_insight.config import InsightConfig, load_config
from lineage_insight.logging_config import get_logger, setup_logging


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_level_follows_verbosity(self, verbosity, level):
        logger = setup_logging(InsightConfig(verbosity=verbosity))
        assert logger.name == "lineage_insight"
        assert logger.level == level

    def test_defaults_without_config(self):
        logger = setup_logging()
        assert logger.level == logging.WARNING
        assert [type(h) for h in logger.handlers] == [RichHandler]

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging(InsightConfig(verbosity="verbose"))
        assert len(logger.handlers) == 1

    def test_log_file_receives_records(self, tmp_path):
        path = tmp_path / "insight.log"
        setup_logging(InsightConfig(log_file=str(path)))
        get_logger("workspace").warning("scan failed for /repo")
        assert "lineage_insight.workspace - WARNING - scan failed for /repo" in path.read_text(
            encoding="utf-8"
        )

    def test_verbosity_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LINEAGE_VERBOSITY", "quiet")
        logger = setup_logging(load_config())
        assert logger.level == logging.ERROR


class TestGetLogger:
    def test_prefixes_package_name(self):
        assert get_logger("cache").name == "lineage_insight.cache"
        assert get_logger("lineage_insight.cache").name == "lineage_insight.cache"
        assert get_logger().name == "lineage_insight"
