"""Report formatting in the scss-lint style."""
from collections.abc import Iterable, Mapping
from typing import Any

from scss_lint_formatter.colors import Colorizer
from scss_lint_formatter.logging_config import get_logger
from scss_lint_formatter.types import FileResult, Message

logger = get_logger(__name__)

ResultInput = FileResult | Mapping[str, Any]


def _coerce(result: ResultInput) -> FileResult:
    if isinstance(result, FileResult):
        return result
    return FileResult.model_validate(result)


class ResultFormatter:
    """Renders lint results as ``path:line:column [E|W] rule: message`` lines."""

    def __init__(self, color_enabled: bool = True, colorizer: Colorizer | None = None) -> None:
        self.colorizer = colorizer if colorizer is not None else Colorizer(color_enabled)

    def format_message(self, file_path: str, lint: Message) -> str:
        """Format a single message as one newline-terminated line.

        Args:
            file_path: Path of the file the message belongs to
            lint: Message to render

        Returns:
            Formatted line
        """
        c = self.colorizer
        location = ":".join([c.cyan(file_path), c.magenta(lint.line), c.magenta(lint.column)])
        tag = c.red("[E]") if lint.is_error else c.yellow("[W]")
        body = f"{c.green(lint.rule_id)}: {lint.message}"
        return f"{location} {tag} {body}\n"

    def format(self, results: Iterable[ResultInput]) -> str:
        """Format results as a scss-lint style report.

        Args:
            results: File results in the order they should be reported

        Returns:
            Report string, empty when there are no messages
        """
        output = []

        for result in results:
            result = _coerce(result)
            for lint in result.messages:
                output.append(self.format_message(result.file_path, lint))

        logger.debug(f"Rendered {len(output)} message line(s)")
        return "".join(output)


def format_results(results: Iterable[ResultInput], color_enabled: bool = True) -> str:
    """Format results with a one-off formatter.

    Args:
        results: File results to format
        color_enabled: Wrap fields in ANSI colors

    Returns:
        Report string
    """
    return ResultFormatter(color_enabled=color_enabled).format(results)


def get_summary(results: Iterable[ResultInput]) -> dict[str, int]:
    """Get summary statistics.

    Args:
        results: List of file results

    Returns:
        Dict with summary counts
    """
    results = [_coerce(r) for r in results]
    total_files = len(results)
    files_with_messages = sum(1 for r in results if r.messages)
    total_messages = sum(len(r.messages) for r in results)
    errors = sum(1 for r in results for m in r.messages if m.is_error)

    return {
        "total_files": total_files,
        "files_with_messages": files_with_messages,
        "clean_files": total_files - files_with_messages,
        "total_messages": total_messages,
        "errors": errors,
        "warnings": total_messages - errors,
    }


def get_exit_code(results: Iterable[ResultInput]) -> int:
    """Get exit code based on results.

    Args:
        results: List of file results

    Returns:
        1 if any error-severity message was reported, 0 otherwise
    """
    has_errors = any(m.is_error for r in map(_coerce, results) for m in r.messages)
    return 1 if has_errors else 0
