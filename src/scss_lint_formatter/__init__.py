"""scss-lint-formatter: scss-lint style report formatter for sass-lint results."""

from scss_lint_formatter.__version__ import __version__
from scss_lint_formatter.colors import Colorizer, resolve_color
from scss_lint_formatter.config import FormatterConfig, get_default_config, load_config
from scss_lint_formatter.formatter import (
    ResultFormatter,
    format_results,
    get_exit_code,
    get_summary,
)
from scss_lint_formatter.loader import load_results, parse_results
from scss_lint_formatter.types import FileResult, Message, Severity

__all__ = [
    "__version__",
    "Colorizer",
    "resolve_color",
    "FormatterConfig",
    "load_config",
    "get_default_config",
    "ResultFormatter",
    "format_results",
    "get_exit_code",
    "get_summary",
    "load_results",
    "parse_results",
    "FileResult",
    "Message",
    "Severity",
]
