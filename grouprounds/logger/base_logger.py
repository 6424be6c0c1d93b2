"""Base logging functionality for search tracing and debugging.

Every message goes to a stdlib ``logging`` logger for the terminal and is also
captured as HTML so a whole search can be written out as one debug page.
"""

import logging
from typing import Any, cast, Callable, List, TypeVar
from functools import wraps

from grouprounds.logger.html_content import CSS_LOG

F = TypeVar("F", bound=Callable[..., Any])

_CONTENT_OPEN = '<div class="content">'


class AlgorithmLogger:
    """Base logger class for algorithm tracing with an HTML capture buffer."""

    def __init__(self, name: str):
        self.name = name
        self.disabled = False
        self._html_content: List[str] = [_CONTENT_OPEN]
        self._section_open = False

        self.logger = logging.getLogger(name)
        # Loggers are process-wide: attach the bare message handler only once per name
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

    def _append(self, html: str) -> None:
        self._html_content.append(html)

    def _close_section(self) -> None:
        if self._section_open:
            self._append("</section>")
            self._section_open = False

    def _emit(self, level: int, css_class: str, message: str) -> None:
        if self.disabled:
            return
        self.logger.log(level, message)
        self._append(f'<p class="{css_class}">{message}</p>')

    def section(self, title: str):
        """Start a new section, closing the previous one."""
        if self.disabled:
            return
        self._close_section()
        self.logger.info(f"\n{'=' * 20} {title} {'=' * 20}\n")
        self._append(f'<section class="section"><h3>{title}</h3>')
        self._section_open = True

    def subsection(self, title: str):
        if self.disabled:
            return
        self.logger.info(f"\n{'-' * 15} {title} {'-' * 15}\n")
        self._append(f'<div class="subsection"><h4>{title}</h4></div>')

    def info(self, message: str):
        self._emit(logging.INFO, "info", message)

    def error(self, message: str):
        self._emit(logging.ERROR, "error", message)

    def debug(self, message: str):
        self._emit(logging.DEBUG, "debug", message)

    def result(self, label: str, value: Any):
        """Log a labelled search outcome (best length, sequence count, ...)."""
        if self.disabled:
            return
        self.logger.info(f"{label}: {value}")
        self._append(f'<div class="result"><strong>{label}:</strong> {value}</div>')

    def raw_html(self, html_content: str):
        """Capture HTML that has no terminal counterpart."""
        if self.disabled:
            return
        self._append(html_content)

    def end_section(self):
        if self.disabled:
            return
        self._close_section()

    def clear(self):
        """Drop everything captured so far."""
        self._html_content = [_CONTENT_OPEN]
        self._section_open = False

    def get_html_content(self) -> str:
        """Captured HTML, with any open section closed in the returned copy only."""
        parts = list(self._html_content)
        if self._section_open:
            parts.append("</section>")
        parts.append("</div>")
        return "\n".join(parts)

    def get_css_content(self) -> str:
        return CSS_LOG

    def log_execution(self, func: F) -> F:
        """Wrap ``func`` in its own section and log how it ended."""

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.section(f"Executing {func.__name__}")
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                self.error(f"{func.__name__} failed: {type(e).__name__}: {e}")
                raise
            self.info(f"{func.__name__} completed successfully")
            return result

        return cast(F, wrapper)
