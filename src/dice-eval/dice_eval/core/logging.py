"""structlog configuration shared by every dice-eval entrypoint."""

import structlog


def configure_structlog(log_format: str = "console") -> None:
    """Configure structlog based on the requested format.

    Raises:
        ValueError: if log_format is neither 'console' nor 'json'.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        raise ValueError(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'."
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
