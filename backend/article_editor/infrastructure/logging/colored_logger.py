"""Colored pipeline logger for export runs.

Every export goes through resolve, render and store. Each stage gets its own
color and icon so that a run can be followed in a busy uvicorn console:

    🔎 RESOLVE   blue
    📄 RENDER    yellow
    💾 STORE     green
    ❌ ERROR     red

Colors can be switched off (``colored=False``) when logs go to a file.
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, NamedTuple

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_BLUE = "\033[94m"
_WHITE = "\033[97m"
_GRAY = "\033[90m"


class StageStyle(NamedTuple):
    label: str
    color: str
    icon: str


class PipelineStage:
    """Export stages and how they are drawn."""

    RESOLVE = StageStyle("RESOLVE", _BLUE, "🔎")
    RENDER = StageStyle("RENDER", _YELLOW, "📄")
    STORE = StageStyle("STORE", _GREEN, "💾")
    PIPELINE = StageStyle("PIPELINE", _WHITE, "⚙️")
    ERROR = StageStyle("ERROR", _RED, "❌")
    COMPLETE = StageStyle("COMPLETE", _GREEN, "✅")


def _format_kwargs(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{key}={value}" for key, value in kwargs.items())


class PipelineLogger:
    """Stage-aware wrapper around a standard ``logging.Logger``.

    Usage:
        plog = PipelineLogger("ExportService")
        with plog.timed_step(PipelineStage.RENDER, "Rendering document", articles=2):
            document = render_export_document(articles)
    """

    def __init__(self, component_name: str, colored: bool = True):
        self._logger = logging.getLogger(component_name)
        self._colored = colored

    def _paint(self, text: str, *codes: str) -> str:
        if not self._colored or not codes:
            return text
        return f"{''.join(codes)}{text}{_RESET}"

    def _emit(self, level: int, text: str, kwargs: dict[str, Any]) -> None:
        if kwargs:
            text += " " + self._paint(f"({_format_kwargs(kwargs)})", _GRAY)
        self._logger.log(level, text)

    def _tag(self, stage: StageStyle, bold: bool = False) -> str:
        codes = (stage.color, _BOLD) if bold else (stage.color,)
        return self._paint(f"{stage.icon} [{stage.label}]", *codes)

    def step_start(self, stage: StageStyle, message: str, **kwargs: Any) -> None:
        text = f"{self._tag(stage, bold=True)} {self._paint(message, stage.color)}"
        self._emit(logging.INFO, text, kwargs)

    def step_complete(self, stage: StageStyle, message: str, **kwargs: Any) -> None:
        text = f"{self._tag(stage)} {self._paint(f'✓ {message}', _GREEN)}"
        self._emit(logging.INFO, text, kwargs)

    def step_warning(self, stage: StageStyle, message: str, **kwargs: Any) -> None:
        """Soft failure: the step ended without a usable result."""
        text = f"{self._tag(stage)} {self._paint(message, _YELLOW)}"
        self._emit(logging.WARNING, text, kwargs)

    def step_error(self, stage: StageStyle, message: str, error: Exception | None = None) -> None:
        text = f"{self._tag(PipelineStage.ERROR, bold=True)} {self._paint(f'[{stage.label}] {message}', _RED)}"
        if error is not None:
            text += " " + self._paint(f"→ {type(error).__name__}: {error}", _DIM)
        self._emit(logging.ERROR, text, {})

    def detail(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.INFO, "   " + self._paint(f"├─ {message}", _GRAY), kwargs)

    def separator(self, title: str = "") -> None:
        line = f"{'─' * 10} {title} {'─' * max(0, 50 - len(title))}" if title else "─" * 60
        self._logger.info(self._paint(line, _GRAY))

    @contextmanager
    def timed_step(self, stage: StageStyle, message: str, **kwargs: Any) -> Iterator[None]:
        """Log the start of a step, then its outcome with elapsed seconds.

        Exceptions are logged as step errors and propagate unchanged.
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - start:.2f}s", error=e)
            raise
        self.step_complete(stage, f"{message} ({time.perf_counter() - start:.2f}s)")
