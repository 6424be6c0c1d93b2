import traceback
from typing import Dict, Any, Optional
from functools import wraps
from datetime import datetime

from grouprounds.logger import ga_logger


def log_detailed_error(error: Exception, context: Optional[Dict[str, Any]] = None):
    """Log a detailed error with context information."""
    if ga_logger.disabled:
        return

    ga_logger.section("ERROR DETAILS")

    error_type = type(error).__name__
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    ga_logger.error(f"{error_type} at {timestamp}: {error}")
    ga_logger.raw_html(
        f"""
        <div class="error-container">
            <h3>Error Detected: {error_type}</h3>
            <p><strong>Message:</strong> {error}</p>
        </div>
        """
    )

    tb_str = "".join(traceback.format_tb(error.__traceback__))
    ga_logger.raw_html(f"""<pre class="stack-trace"><code>{tb_str}</code></pre>""")

    if context:
        ga_logger.subsection("Error Context")
        for key, value in context.items():
            ga_logger.info(f"{key}: {value}")


def debug_algorithm_execution(func):
    """Decorator to wrap algorithm execution with debugging."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            ga_logger.section(f"Running {func.__name__}")
            result = func(*args, **kwargs)
            ga_logger.info(f"Completed {func.__name__} successfully")
            return result

        except Exception as e:
            log_detailed_error(
                e,
                {
                    "function": func.__name__,
                    "args_count": len(args),
                    "kwargs": str(list(kwargs.keys())),
                },
            )
            raise

    return wrapper
