"""Unit tests for environment settings and logging setup."""

import json
import logging

import pytest
from pydantic import ValidationError

from promptdeck.config import Settings, load_settings
from promptdeck.logging_setup import JSONFormatter


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings(env={}, dotenv=False)

        assert settings == Settings()
        assert settings.strict is False
        assert settings.runs_dir == "runs"
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_variables(self):
        settings = load_settings(
            env={
                "PROMPTDECK_STRICT": "true",
                "PROMPTDECK_RUNS_DIR": "/tmp/prompts",
                "PROMPTDECK_LOG_LEVEL": "debug",
                "PROMPTDECK_LOG_JSON": "1",
                "STRICT": "false",
            },
            dotenv=False,
        )

        assert settings.strict is True
        assert settings.runs_dir == "/tmp/prompts"
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_blank_values_use_defaults(self):
        settings = load_settings(env={"PROMPTDECK_RUNS_DIR": ""}, dotenv=False)

        assert settings.runs_dir == "runs"

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError):
            load_settings(env={"PROMPTDECK_LOG_LEVEL": "loud"}, dotenv=False)

    def test_invalid_bool_rejected(self):
        with pytest.raises(ValidationError):
            load_settings(env={"PROMPTDECK_STRICT": "sometimes"}, dotenv=False)

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("PROMPTDECK_STRICT", "yes")

        assert load_settings(dotenv=False).strict is True


class TestJSONFormatter:
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="promptdeck.renderer",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Rendered template '%s'",
            args=("diagram",),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_core_fields(self):
        entry = json.loads(JSONFormatter().format(self._record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "promptdeck.renderer"
        assert entry["message"] == "Rendered template 'diagram'"
        assert "timestamp" in entry
        assert "template_id" not in entry

    def test_extra_fields(self):
        record = self._record(template_id="diagram", placeholders=["TerraformSource"])

        entry = json.loads(JSONFormatter().format(record))

        assert entry["template_id"] == "diagram"
        assert entry["placeholders"] == ["TerraformSource"]
