"""Configuración centralizada de logging."""

from __future__ import annotations

import logging
from logging import Logger
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _has_default_handler(logger: Logger, *, rich: bool) -> bool:
    # `caplog` y similares heredan de StreamHandler: se compara el tipo exacto.
    expected = RichHandler if rich else logging.StreamHandler
    return any(type(handler) is expected for handler in logger.handlers)


def configure_logging(
    level: int | str = logging.INFO,
    *,
    handlers: Iterable[logging.Handler] | None = None,
    rich: bool = True,
    console: Console | None = None,
) -> Logger:
    """Configura el root logger.

    Con `rich=True` (CLI) los logs van por `RichHandler` a stderr; si no, a un
    `StreamHandler` con `DEFAULT_LOG_FORMAT`. Llamarla otra vez solo cambia el
    nivel: no duplica el handler por defecto.
    """

    logger = logging.getLogger()
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if handlers is None:
        if _has_default_handler(logger, rich=rich):
            return logger
        if rich:
            handler: logging.Handler = RichHandler(
                console=console or Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
            handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        logger.addHandler(handler)
    else:
        for extra in handlers:
            logger.addHandler(extra)

    return logger


__all__ = ["configure_logging", "DEFAULT_LOG_FORMAT"]
