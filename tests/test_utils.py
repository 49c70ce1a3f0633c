import logging
from contextlib import contextmanager

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from clparser.utils import running_in_container, setup_logging


@contextmanager
def isolated_root_logger():
    """Restore the root logger handlers replaced by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = handlers
        root.setLevel(level)


def test_cli_mode():
    with isolated_root_logger() as root:
        setup_logging(mode="cli", console_log_level=logging.INFO)
        (handler,) = root.handlers
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.INFO


def test_json_mode():
    with isolated_root_logger() as root:
        setup_logging(mode="json")
        (handler,) = root.handlers
        assert isinstance(handler.formatter, JsonFormatter)
        assert handler.level == logging.WARNING


def test_mode_from_environment(monkeypatch):
    monkeypatch.setenv("CLPARSER_LOG_MODE", "json")
    with isolated_root_logger() as root:
        setup_logging()
        assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_log_file(tmp_path):
    log_file = tmp_path / "clparser.log"
    with isolated_root_logger() as root:
        setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
        _, file_handler = root.handlers
        assert isinstance(file_handler, logging.FileHandler)
        assert isinstance(file_handler.formatter, JsonFormatter)
        logging.getLogger("clparser").debug("written to file")
        file_handler.flush()
    assert "written to file" in log_file.read_text()


def test_invalid_mode():
    with isolated_root_logger():
        with pytest.raises(ValueError, match="Invalid log mode"):
            setup_logging(mode="xml")


def test_invalid_mode_keeps_handlers():
    with isolated_root_logger() as root:
        before = root.handlers[:]
        with pytest.raises(ValueError):
            setup_logging(mode="xml")
        assert root.handlers == before


def test_running_in_container_from_environment(monkeypatch):
    monkeypatch.setenv("container", "podman")
    assert running_in_container() is True


def test_container_mode_defaults_to_json(monkeypatch):
    monkeypatch.delenv("CLPARSER_LOG_MODE", raising=False)
    monkeypatch.setattr("clparser.utils.running_in_container", lambda: True)
    with isolated_root_logger() as root:
        setup_logging()
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
