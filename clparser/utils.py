# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman", "lxc")
_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def running_in_container() -> bool:
    if Path("/.dockerenv").exists() or os.getenv("container"):
        return True
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in _CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter(_JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Replace the root logger handlers with a console handler and an optional file.

    The library only logs to the "clparser" logger and never calls this itself.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for JSON lines.
            Defaults to `CLPARSER_LOG_MODE`, else "json" inside a container.
        log_filename (str | None): Also append records to this file.
        json_log_to_file (bool): Write the file records as JSON.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv("CLPARSER_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(JsonFormatter(_JSON_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logging.getLogger("clparser").debug("Logging initialized in '%s' mode", mode)
