"""HTML debug output for captured search logs."""

from pathlib import Path
from typing import Union

from grouprounds.logger.base_logger import AlgorithmLogger


def generate_debug_html(logger: AlgorithmLogger, title: str = "Group Assignment Debug") -> str:
    """Wrap a logger's captured content in a standalone HTML document."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{title}</title>\n"
        f"<style>{logger.get_css_content()}</style>\n"
        "</head>\n<body>\n"
        f"<h1>{title}</h1>\n"
        f"{logger.get_html_content()}\n"
        "</body>\n</html>\n"
    )


def write_debug_output(
    logger: AlgorithmLogger,
    output_path: Union[str, Path],
    title: str = "Group Assignment Debug",
) -> Path:
    """
    Write the captured log of ``logger`` to an HTML file.

    Parent directories are created as needed.

    Returns:
        The path that was written.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_debug_html(logger, title), encoding="utf-8")
    return path
