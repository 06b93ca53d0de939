import logging
from typing import List, Optional

import structlog
from structlog.types import Processor


def _shared_processors(json_logs: bool) -> List[Processor]:
    """Processors applied to structlog events and to plain `logging` records alike."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        # ConsoleRenderer prints tracebacks itself
        processors.append(structlog.processors.format_exc_info)
    return processors


def _has_structlog_handler(root_logger: logging.Logger) -> bool:
    return any(
        isinstance(handler, logging.StreamHandler)
        and isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        for handler in root_logger.handlers
    )


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """
    Route serverconf events through the root logger.

    Does nothing when structlog or the root logger has already been set up.
    """
    root_logger = logging.getLogger()
    if structlog.is_configured() or _has_structlog_handler(root_logger):
        return

    shared_processors = _shared_processors(json_logs)

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    handler = logging.StreamHandler()
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    ))

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


def get_serverconf_logger(component: Optional[str] = None):
    """
    Get a structured logger for the serverconf package.

    Args:
        component: Optional component name bound to every event as ``component``

    Returns:
        A structlog logger, bound to the component when one is given
    """
    logger = structlog.stdlib.get_logger("serverconf")
    if component is not None:
        return logger.bind(component=component)
    return logger


def init_logger(debug: bool = False, json_logs: bool = False):
    """
    Initialize the structured logger for serverconf package.

    Args:
        debug: Log at DEBUG level instead of INFO
        json_logs: Render events as JSON lines

    Returns:
        Configured structured logger instance
    """
    log_level = "DEBUG" if debug else "INFO"

    setup_logging(json_logs=json_logs, log_level=log_level)

    return get_serverconf_logger()
