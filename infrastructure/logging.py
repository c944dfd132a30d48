import logging
import logging.handlers
import sys

import structlog

from infrastructure.config import Settings, settings

_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _build_handlers(config: Settings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.log_dir is not None:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.TimedRotatingFileHandler(
                config.log_dir / f"{config.app_env}.log",
                when="midnight",
                backupCount=7,
            ),
        )
    return handlers


def setup_logging(config: Settings = settings) -> None:
    """Route structlog events and stdlib records through one formatter.

    Development gets the console renderer, every other environment JSON lines.
    A rotating file is written only when ``LOG_DIR`` is set.
    """
    structlog.configure(
        processors=[*_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if config.app_env == "development"
        else structlog.processors.JSONRenderer()
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PROCESSORS,
        processor=renderer,
    )

    root_logger = logging.getLogger()
    for handler in _build_handlers(config):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level.upper())

    # fsspec logs every open at DEBUG
    logging.getLogger("fsspec").setLevel(max(root_logger.level, logging.INFO))
