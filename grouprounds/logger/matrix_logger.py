"""Matrix display functionality for logs."""

from typing import Any, Dict, List, Optional, TYPE_CHECKING

from tabulate import tabulate

from grouprounds.logger.base_logger import AlgorithmLogger

if TYPE_CHECKING:
    from grouprounds.elements.conflict_matrix import ConflictMatrix


def conflict_rows(
    conflicts: "ConflictMatrix", on: str = "x", off: str = ".", diagonal: str = "-"
) -> List[List[str]]:
    """Render the relation as rows of single-character cells."""
    n = conflicts.n
    rows: List[List[str]] = []
    for i in range(n):
        row = []
        for j in range(n):
            if i == j:
                row.append(diagonal)
            else:
                row.append(on if conflicts.matrix[i, j] else off)
        rows.append(row)
    return rows


class MatrixLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with conflict matrix display support."""

    def conflict_matrix(
        self,
        conflicts: "ConflictMatrix",
        labels: Optional[Dict[int, str]] = None,
        title: str = "",
    ) -> None:
        """
        Display the conflict relation as an ASCII grid in the terminal and as a
        highlighted table in the HTML output.
        """
        if self.disabled or conflicts.n == 0:
            return

        labels = labels or {}
        names = [labels.get(i, str(i)) for i in range(conflicts.n)]
        rows = conflict_rows(conflicts)

        if title:
            self.logger.info(f"\n{title}:")

        terminal_rows: List[List[Any]] = [[name] + row for name, row in zip(names, rows)]
        self.logger.info(
            tabulate(terminal_rows, headers=[""] + names, tablefmt="simple")
        )
        self.logger.info(f"{conflicts.pair_count()} forbidden pair(s)")

        html = ['<div class="matrix-container">']
        if title:
            html.append(f"<h4>{title}</h4>")
        html.append('<table class="conflict-matrix"><tr><th></th>')
        html.extend(f"<th>{name}</th>" for name in names)
        html.append("</tr>")
        for name, row in zip(names, rows):
            html.append(f"<tr><th>{name}</th>")
            for cell in row:
                css = ' class="on"' if cell == "x" else ""
                html.append(f"<td{css}>{cell}</td>")
            html.append("</tr>")
        html.append("</table></div>")
        self._append("".join(html))
