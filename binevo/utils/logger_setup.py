"""loguru sinks for binevo runs: a console sink and an optional rotating file."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

_FIELDS = "{name}:{function}:{line} | [{extra[run]}] {message}"


def _safe_run_name(run_name: str) -> str:
    return "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in run_name) or "run"


def setup_logger(
    log_dir: str | Path = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
    enable_colors: bool = True,
    run_name: str = "binevo",
    log_to_file: bool = True,
) -> Path | None:
    """
    Replace every loguru sink with a console sink and, unless disabled, a
    zip-compressed rotating file named ``<run_name>_<utc timestamp>.log``.

    Every record carries ``run_name`` in its ``extra`` so interleaved runs can
    be told apart.

    Returns:
        Path of the log file, or None when ``log_to_file`` is false
    """
    logger.remove()
    logger.configure(extra={"run": run_name})

    colorize = enable_colors and sys.stdout.isatty()
    console_format = (
        "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<blue>{function}</blue> | "
        "<magenta>{extra[run]}</magenta> | <level>{message}</level>"
        if colorize
        else "{time:HH:mm:ss.SSS} | {level: <8} | " + _FIELDS
    )
    logger.add(sys.stdout, level=level, format=console_format, colorize=colorize)

    if not log_to_file:
        logger.debug("Logger initialized (console only, level={})", level)
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"{_safe_run_name(run_name)}_{timestamp}.log"

    logger.add(
        log_file,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | " + _FIELDS,
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )
    logger.info("Logger initialized | file={}, level={}", log_file, level)
    return log_file
