"""loguru configuration shared by the Streamlit app and the dev backend."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from omegaconf import DictConfig

_NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "watchdog", "uvicorn.access")

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[component]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_configured = False


class _StdlibToLoguru(logging.Handler):
    """Forward records from stdlib loggers (requests, uvicorn, streamlit) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(cfg: DictConfig | dict[str, Any], *, component: str = "claims", force: bool = False) -> None:
    """Install the loguru sink described by *cfg*.

    Parameters
    ----------
    cfg:
        The ``logging`` config section: ``level``, ``colored`` and ``format``
        (``"pretty"`` for console output, ``"structured"`` for JSON lines).
    component:
        Tag added to every record (``frontend`` / ``backend``).
    force:
        Reconfigure even if logging was already set up in this process.
        Streamlit re-executes the app script on every interaction, so repeat
        calls are no-ops by default.
    """
    global _configured
    if _configured and not force:
        return

    level = str(cfg.get("level", "INFO")).upper()
    structured = cfg.get("format", "pretty") == "structured"

    logger.remove()
    logger.configure(extra={"component": component})
    if structured:
        logger.add(sys.stderr, level=level, serialize=True, colorize=False)
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=_CONSOLE_FORMAT,
            colorize=bool(cfg.get("colored", True)),
        )

    logging.basicConfig(handlers=[_StdlibToLoguru()], level=0, force=True)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logger.debug("Logging ready (level={level}, structured={structured})", level=level, structured=structured)
