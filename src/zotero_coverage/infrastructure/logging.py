"""Run-scoped logging for the coverage check.

Every record carries the correlation id of the current run and is written to
stderr, so stdout holds nothing but the report.
"""

import logging
import sys
import uuid
from contextvars import ContextVar

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s correlation_id=%(correlation_id)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str:
    """Return the id of the current run, creating one on first use."""
    corr_id = correlation_id_var.get()
    if corr_id is None:
        corr_id = str(uuid.uuid4())
        correlation_id_var.set(corr_id)
    return corr_id


def set_correlation_id(corr_id: str) -> None:
    correlation_id_var.set(corr_id)


class CorrelationIDFilter(logging.Filter):
    """Stamp each record with the run's correlation id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()  # type: ignore[attr-defined]
        return True


def configure_logging(verbose: bool = False) -> None:
    """
    Route all logging to stderr for one `check` run.

    Args:
        verbose: Emit DEBUG records (parsing, key extraction, resolution steps);
            otherwise only warnings and errors are shown
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(CorrelationIDFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
