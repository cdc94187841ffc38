import logging
import os
import sys
from typing import Any, Literal

import structlog

LogFormat = Literal["json", "plain", "auto"]


def _should_use_json_format() -> bool:
    """Determine if JSON format should be used based on environment."""
    # Check if running in CI
    ci_vars = ["CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL"]
    if any(os.environ.get(var) for var in ci_vars):
        return True

    # Check if stdout is redirected (not a TTY)
    return bool(not sys.stdout.isatty())


def setup_logging(format_type: LogFormat = "auto", level: str = "WARNING") -> None:
    """
    Setup structured logging with format and level control.

    Args:
        format_type: "json" for JSON output, "plain" for human-readable,
                "auto" to auto-detect based on TTY/CI.
        level: minimum level name ("DEBUG", "INFO", ...). Events below it
                are discarded before rendering.

    Events go to stderr; stdout is reserved for wrapped text.
    """
    use_json = format_type == "json" or (format_type == "auto" and _should_use_json_format())

    if use_json:
        processors: list[Any] = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    min_level = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Not cached: tests swap processors with capture_logs()
        cache_logger_on_first_use=False,
    )


log = structlog.get_logger()


def debug_event(event: str, **kw: Any) -> None:
    """Emit a library debug event, but only once the application has
    configured structlog (setup_logging, capture_logs, or its own setup).

    Unconfigured structlog prints to stdout, which would mix log lines into
    a caller's wrapped text.
    """
    if structlog.is_configured():
        log.debug(event, **kw)
