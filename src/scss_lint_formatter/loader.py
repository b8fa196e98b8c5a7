"""Loading lint results from the host linter's JSON output."""
import json
from pathlib import Path

from pydantic import ValidationError

from scss_lint_formatter.logging_config import get_logger
from scss_lint_formatter.types import FileResult

logger = get_logger(__name__)


def parse_results(text: str) -> list[FileResult]:
    """Parse a JSON array of file results.

    Args:
        text: JSON document, e.g. the output of ``sass-lint --format json``

    Returns:
        List of validated file results, in document order

    Raises:
        ValueError: If the document is not valid JSON, not a list, or an
            entry is missing required fields
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in lint results: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Lint results must be a JSON array, got {type(data).__name__}")

    results = []
    for index, entry in enumerate(data):
        try:
            results.append(FileResult.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"Invalid lint result at index {index}: {e}") from e

    logger.info(
        f"Loaded {len(results)} file result(s) with "
        f"{sum(len(r.messages) for r in results)} message(s)"
    )
    return results


def load_results(results_path: Path) -> list[FileResult]:
    """Load file results from a JSON file.

    Args:
        results_path: Path to the JSON results file

    Returns:
        List of validated file results

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the contents are invalid
    """
    with results_path.open(encoding="utf-8") as f:
        return parse_results(f.read())
