import logging
import sys

import structlog

from blink.settings import settings


def configure_logging(level: str | None = None) -> None:
  """Configure structlog for normal application logging.

  Args:
      level: Minimum level name such as "DEBUG" or "WARNING".
             Defaults to settings.log_level.
  """
  level_name = (level or settings.log_level).upper()
  min_level = getattr(logging, level_name, logging.INFO)

  structlog.configure(
    processors=[
      structlog.processors.TimeStamper(fmt="iso"),
      structlog.processors.add_log_level,
      structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(min_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
  )
