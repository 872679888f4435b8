"""Centralized logging configuration for the SaaSistent CLI."""

import logging
import logging.handlers

from rich.logging import RichHandler

from saasistent.config.schema import LoggingConfig
from saasistent.storage.paths import expand_path, get_logs_dir


def _file_handler(cfg: LoggingConfig, level: int) -> logging.Handler:
    log_path = expand_path(cfg.file) if cfg.file else get_logs_dir() / "saasistent.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)
    h = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=cfg.max_bytes, backupCount=cfg.backup_count, encoding="utf-8"
    )
    h.setLevel(level)
    h.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return h


def _console_handler(level: int) -> logging.Handler:
    h = RichHandler(show_path=False, rich_tracebacks=True)
    h.setLevel(level)
    return h


def setup_logging(cfg: LoggingConfig, verbose: bool = False) -> None:
    """Configure the root logger: file handler with optional console output.

    Logs only to file by default to keep the CLI output clean; ``verbose``
    adds a Rich console handler at DEBUG level.
    """
    level = logging.DEBUG if verbose else getattr(logging, cfg.level, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)

    try:
        root.addHandler(_file_handler(cfg, level))
    except OSError:
        # Unwritable log location; fall back to the console
        verbose = True

    if cfg.console or verbose:
        root.addHandler(_console_handler(level))

    # LiteLLM is chatty at INFO
    logging.getLogger("LiteLLM").setLevel(max(level, logging.WARNING))
