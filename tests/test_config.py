"""Tests for settings and logging setup."""

import logging
from typing import Callable, Iterator, List, Optional

import pytest

from user_result_api.app.core import logging_config
from user_result_api.app.core.config import Settings
from user_result_api.app.main import build_store


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DEBUG", "SEED_USERS", "STORE_LATENCY_MS", "PORT", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.debug is False
    assert settings.seed_users is False
    assert settings.store_latency_ms == 0
    assert settings.port == 8000
    assert settings.log_file is None


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("SEED_USERS", "1")
    monkeypatch.setenv("STORE_LATENCY_MS", "10")
    monkeypatch.setenv("PORT", "9001")
    settings = Settings()
    assert settings.debug is True
    assert settings.seed_users is True
    assert settings.store_latency_ms == 10
    assert settings.port == 9001


def test_build_store_honours_seed_flag() -> None:
    assert len(build_store(Settings(seed_users=True))) == 2
    assert len(build_store(Settings(seed_users=False))) == 0


class TestSetupLogging:
    @pytest.fixture
    def bare_root(self) -> Iterator[Callable[[], logging.Logger]]:
        """Return a callable that strips the root logger of its handlers.

        pytest attaches its capture handlers between fixture setup and the
        test call, so tests invoke this right before ``setup_logging``.
        Handlers present both at setup and when stripped are the
        session-wide ones and are put back afterwards.
        """
        root = logging.getLogger()
        at_setup = list(root.handlers)
        level = root.level
        persistent: Optional[List[logging.Handler]] = None

        def strip() -> logging.Logger:
            nonlocal persistent
            persistent = [handler for handler in root.handlers if handler in at_setup]
            root.handlers = []
            return root

        yield strip
        if persistent is not None:
            root.handlers = persistent
            root.setLevel(level)

    def test_adds_console_handler(self, bare_root: Callable[[], logging.Logger]) -> None:
        root = bare_root()
        logging_config.setup_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == logging_config.LOG_FORMAT

    def test_second_call_is_noop(self, bare_root: Callable[[], logging.Logger]) -> None:
        root = bare_root()
        logging_config.setup_logging("INFO")
        logging_config.setup_logging("INFO")
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self, bare_root: Callable[[], logging.Logger]) -> None:
        root = bare_root()
        logging_config.setup_logging("chatty")
        assert root.level == logging.INFO

    def test_file_handler(self, bare_root: Callable[[], logging.Logger], tmp_path) -> None:
        root = bare_root()
        logfile = tmp_path / "api.log"
        logging_config.setup_logging("INFO", str(logfile))
        assert len(root.handlers) == 2
        logging.getLogger("user_result_api.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in logfile.read_text(encoding="utf-8")
        root.handlers[1].close()
