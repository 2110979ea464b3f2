"""Colored transfer logger — ANSI-colored console tracing for CSV import and export.

Color scheme:
    Cyan    — Parsing / Export
    Green   — Imported rows / Completion
    Yellow  — Skipped duplicates
    Red     — Row errors / Aborts
    Gray    — Details and counters
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


class TransferStage:
    """Stages of a CSV transfer, each with a label and color."""

    PARSE = ("PARSE", _Colors.CYAN)
    EXPORT = ("EXPORT", _Colors.CYAN)
    IMPORT = ("IMPORT", _Colors.GREEN)
    SKIP = ("SKIP", _Colors.YELLOW)
    ERROR = ("ERROR", _Colors.RED)
    COMPLETE = ("COMPLETE", _Colors.GREEN)


def _format_kwargs(kwargs: dict[str, Any]) -> str:
    if not kwargs:
        return ""
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {_Colors.GRAY}({details}){_Colors.RESET}"


class TransferLogger:
    """Color-coded logger for bulk CSV transfers.

    Usage:
        log = TransferLogger("CsvExchangeService")
        log.step(TransferStage.PARSE, "Parsed 42 rows")
        log.row_error("10497", "connection refused")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step(self, stage: tuple[str, str], message: str, **kwargs: Any) -> None:
        label, color = stage
        self._logger.info(
            f"{color}{_Colors.BOLD}[{label}]{_Colors.RESET} {color}{message}{_Colors.RESET}"
            + _format_kwargs(kwargs)
        )

    def detail(self, message: str, **kwargs: Any) -> None:
        """Per-row detail, logged at DEBUG so large imports stay quiet."""
        self._logger.debug(f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}" + _format_kwargs(kwargs))

    def row_error(self, set_number: str, message: str) -> None:
        label, color = TransferStage.ERROR
        self._logger.warning(
            f"{color}{_Colors.BOLD}[{label}]{_Colors.RESET} "
            f"{color}set {set_number}: {message}{_Colors.RESET}"
        )

    def stats(self, **kwargs: Any) -> None:
        parts = [f"{k}: {v}" for k, v in kwargs.items()]
        self._logger.info(f"   {_Colors.GRAY}{' | '.join(parts)}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str], message: str, **kwargs: Any):
        """Log start and end of a step with the elapsed time; failures are logged and re-raised."""
        self.step(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            label, _ = stage
            self._logger.error(
                f"{_Colors.RED}{_Colors.BOLD}[{label}]{_Colors.RESET} "
                f"{_Colors.RED}{message} failed after {elapsed:.2f}s{_Colors.RESET} "
                f"{_Colors.DIM}{type(e).__name__}: {e}{_Colors.RESET}"
            )
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step(TransferStage.COMPLETE, f"{message} in {elapsed:.2f}s")
