"""
Tests for SportMonksLogger.
"""

import json
import logging

from sportmonks_client.core.logging.config import LoggingConfig, LogLevel, LogFormat
from sportmonks_client.core.logging.filters import set_correlation_id, clear_correlation_id
from sportmonks_client.core.logging.logger import SportMonksLogger


class TestSportMonksLogger:

    def setup_method(self):
        clear_correlation_id()

    def test_defaults(self):
        logger = SportMonksLogger()

        assert logger.name == "sportmonks_client"
        assert logger.config.level == LogLevel.INFO
        assert logger.config.format == LogFormat.TEXT
        assert len(logger.handlers) == 1
        logger.close()

    def test_no_console_no_handlers(self):
        logger = SportMonksLogger(LoggingConfig.create(enable_console=False))
        assert logger.handlers == []
        logger.close()

    def test_reinit_replaces_handlers(self):
        first = SportMonksLogger()
        second = SportMonksLogger()

        assert len(second.handlers) == 1
        first.close()
        second.close()

    def test_json_file_output_masks_secrets(self, tmp_path):
        path = tmp_path / "client.log"
        config = LoggingConfig.create(level="DEBUG", format="json", enable_console=False, file_path=str(path))
        set_correlation_id("req-1")

        with SportMonksLogger(config) as logger:
            logger.info(
                "Request completed",
                endpoint="/football/leagues",
                params={"api_token": "super-secret", "include": "country"},
            )

        data = json.loads(path.read_text(encoding="utf-8").strip())
        assert data["message"] == "Request completed"
        assert data["endpoint"] == "/football/leagues"
        assert data["params"]["include"] == "country"
        assert data["params"]["api_token"] != "super-secret"
        assert data["correlation_id"] == "req-1"

    def test_params_dropped_when_disabled(self, tmp_path):
        path = tmp_path / "client.log"
        config = LoggingConfig.create(format="json", enable_console=False, file_path=str(path), log_params=False)

        with SportMonksLogger(config) as logger:
            logger.info("Request completed", endpoint="/football/leagues", params={"include": "country"})

        data = json.loads(path.read_text(encoding="utf-8").strip())
        assert data["endpoint"] == "/football/leagues"
        assert "params" not in data

    def test_level_filters_records(self, tmp_path):
        path = tmp_path / "client.log"
        config = LoggingConfig.create(level="WARNING", enable_console=False, file_path=str(path))

        with SportMonksLogger(config) as logger:
            logger.debug("hidden")
            logger.info("hidden too")
            logger.warning("shown")

        content = path.read_text(encoding="utf-8")
        assert "shown" in content
        assert "hidden" not in content

    def test_exception_includes_traceback(self, tmp_path):
        path = tmp_path / "client.log"
        config = LoggingConfig.create(format="json", enable_console=False, file_path=str(path))

        with SportMonksLogger(config) as logger:
            try:
                raise RuntimeError("fetch failed")
            except RuntimeError:
                logger.exception("Poll failed")

        data = json.loads(path.read_text(encoding="utf-8").strip())
        assert "RuntimeError: fetch failed" in data["exception"]

    def test_close_idempotent_and_restores_propagation(self):
        logger = SportMonksLogger()
        internal = logging.getLogger("sportmonks_client")
        assert internal.propagate is False

        logger.close()
        logger.close()

        assert logger.handlers == []
        assert internal.propagate is True
