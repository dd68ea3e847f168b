"""Logging configuration helpers."""

from __future__ import annotations

import logging
import logging.handlers
from typing import List, Optional

from config.models import LoggingConfig


def configure_logging(config: LoggingConfig, level: Optional[str] = None) -> None:
    """Setup Python logging according to provided configuration.

    level 非空时覆盖配置文件中的级别（命令行 --log-level）。
    """

    log_level = getattr(logging, (level or config.level).upper(), logging.WARNING)
    logging.captureWarnings(True)

    handlers: List[logging.Handler] = []
    log_path = config.resolved_path()
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(_build_formatter())
        handlers.append(file_handler)

    if config.console or not handlers:
        # 日志走 stderr，不与 shell 的 stdout 输出混在一起
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(_build_formatter())
        handlers.append(console_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def _build_formatter() -> logging.Formatter:
    fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    return logging.Formatter(fmt=fmt, datefmt=datefmt)
