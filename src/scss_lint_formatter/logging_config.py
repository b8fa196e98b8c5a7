"""Logging configuration for scss-lint-formatter."""
import logging
import sys

PACKAGE_LOGGER = "scss_lint_formatter"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for scss-lint-formatter.

    Args:
        verbose: Enable verbose (INFO level) logging
        quiet: Enable quiet (ERROR only) logging
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    # Reconfiguring must not stack handlers
    logger.handlers.clear()

    # Report goes to stdout, diagnostics to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (will be prefixed with 'scss_lint_formatter.')

    Returns:
        Logger instance
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
