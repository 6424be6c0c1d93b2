"""Table display functionality for logs.

Renders small tables (size plans, round listings, result summaries) for the
terminal via ``tabulate`` and for the HTML capture buffer.
"""

from typing import Any, List, Optional
from tabulate import tabulate
from grouprounds.logger.base_logger import AlgorithmLogger


class TableLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with table support."""

    def table(
        self,
        data: List[List[Any]],
        headers: Optional[List[str]] = None,
        title: Optional[str] = None,
    ) -> None:
        """Log ``data`` as a grid in the terminal and as an HTML table in the capture."""
        if self.disabled:
            return

        headers = headers or []
        if title:
            self.logger.info(f"\n{title}:")
            self._append(f"<h4>{title}</h4>")

        self.logger.info(tabulate(data, headers=headers, tablefmt="grid"))
        body = tabulate(data, headers=headers, tablefmt="html")
        self._append(f'<div class="table-container">{body}</div>')
