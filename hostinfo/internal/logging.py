import logging
import logging.handlers
import os
import sys
from pathlib import Path
import structlog

from hostinfo.internal.constants import APP_NAME, LOG_LEVEL_ENV

_LOGGING_CONFIGURED = False

_FOREIGN_PRE_CHAIN = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
]


_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter, # Key to integrate with stdlib handlers
]


def _configure_structlog():
    structlog.configure(
        processors=_PROCESSORS,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _formatter(renderer) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_FOREIGN_PRE_CHAIN,
    )


def setup_logging(log_level_name: str = "INFO", log_file_path: Path = None, console_output: bool = False):
    """
    Configure logging for an application embedding hostinfo (or for the CLI).
    - Uses structlog for structured logging.
    - Writes JSON logs to a rotating file if log_file_path ends in `.json`,
      plain key=value lines otherwise.
    - Can optionally send human-readable logs to the console (stderr).
    - Log level can be set with the HOSTINFO_LOG_LEVEL environment variable or function argument.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return # Prevent re-configuring logging

    effective_log_level_name = os.environ.get(LOG_LEVEL_ENV, log_level_name).upper()
    log_level = getattr(logging, effective_log_level_name, logging.INFO)

    handlers = []

    if log_file_path:
        log_file_path = Path(log_file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=5,
        )
        if log_file_path.name.endswith(".json"):
            file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        else:
            file_handler.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=False)))
        handlers.append(file_handler)

    # stdout is reserved for command output
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=False)))
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    _configure_structlog()

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None):
    # Own processor chain; the global structlog configuration is never read or written here
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# No output until the host application calls setup_logging()
logging.getLogger(APP_NAME).addHandler(logging.NullHandler())
