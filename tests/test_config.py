"""Tests for environment-driven settings."""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from urlinfo.config import Settings
from urlinfo.logging_config import setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in (
            "URLINFO_REQUEST_TIMEOUT",
            "URLINFO_PROBE_TIMEOUT",
            "URLINFO_COLLECTION_WINDOW",
            "URLINFO_MAX_CONCURRENT_PROBES",
            "URLINFO_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        s = Settings()
        assert s.request_timeout == 30.0
        assert s.probe_timeout == 5.0
        assert s.collection_window == 0.01
        assert s.max_concurrent_probes == 32
        assert s.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("URLINFO_COLLECTION_WINDOW", "0.5")
        monkeypatch.setenv("URLINFO_MAX_CONCURRENT_PROBES", "4")
        monkeypatch.setenv("URLINFO_USER_AGENT", "test-agent/1.0")

        s = Settings()
        assert s.collection_window == 0.5
        assert s.max_concurrent_probes == 4
        assert s.user_agent == "test-agent/1.0"


class TestSetupLogging:
    def test_installs_json_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug")
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, JsonFormatter)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_handler_writes_to_stderr(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("info")
            assert root.handlers[0].stream is sys.stderr
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
