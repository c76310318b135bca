"""
Logging setup for vcard_parser.

All loggers hang off the ``vcard_parser`` base logger, which owns a console
handler. When ``logging.to_file`` is set in ``config/vcard_parser.yml`` the
base logger also writes ``logs/vcard_parser.log`` and every module logger
writes its own ``logs/<module>.log`` (rotating when ``logging.rotate`` is
set).

Parse diagnostics (malformed lines, unknown properties, bad dates) arrive
here at WARNING level.
"""

from __future__ import annotations

import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from vcard_parser.config import get_config

BASE_LOGGER_NAME = "vcard_parser"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_loggers: Dict[str, Logger] = {}
_level: int = logging.INFO
# None until the base logger is configured; then the log directory, or
# False when file output is off.
_log_dir: Optional[Path | bool] = None


def _file_handler(filename: str) -> logging.Handler:
    cfg = get_config()
    path = _log_dir / filename  # type: ignore[operator]
    if cfg.logging.get("rotate", False):
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _base_logger() -> Logger:
    global _level, _log_dir

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _log_dir is not None:
        return base

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    _level = logging.DEBUG if cfg.debug else getattr(logging, level_name, logging.INFO)

    base.setLevel(_level)
    base.propagate = False

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if cfg.debug else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)

    if cfg.logging.get("to_file", False):
        log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        _log_dir = log_dir
        base.addHandler(_file_handler(cfg.logging.get("file", "vcard_parser.log")))
    else:
        _log_dir = False

    _loggers[BASE_LOGGER_NAME] = base
    return base


def get_logger(name: str | None = None) -> Logger:
    """
    Return a logger under the ``vcard_parser`` hierarchy.

        get_logger("parser_core")             -> vcard_parser.parser_core
        get_logger("vcard_parser.loader.lexer") -> unchanged
        get_logger()                          -> vcard_parser
    """
    base = _base_logger()
    if not name or name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    logger.setLevel(_level)
    logger.propagate = True
    if _log_dir and not any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        handler = _file_handler(f"{name.replace('.', '_')}.log")
        handler.is_module_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    _loggers[name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names handed out so far (useful when checking handler setup in tests)."""
    return list(_loggers)
