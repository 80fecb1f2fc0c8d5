"""Error hints for fatal loader errors.

Provides user-friendly hints with actionable remediation steps
for template and module loading failures.
"""

from typing import Final

from src.loader.errors import (
    CannotOpenFileError,
    LoaderError,
    ModuleNotFetchedError,
    TemplateParseError,
)


ERROR_HINTS: Final[dict[type[LoaderError], str]] = {
    ModuleNotFetchedError: "Run `terraform get` to fetch modules first.",
    CannotOpenFileError: "The file disappeared or is unreadable. Check its permissions.",
    TemplateParseError: "Invalid HCL syntax. Run `terraform validate` to locate the problem.",
}

DEFAULT_HINT: Final = "Check the configuration files and try again."


def get_error_hint(error: BaseException) -> str:
    """Get a user-friendly hint for a loader error.

    Args:
        error: The raised error.

    Returns:
        A user-friendly hint string.
    """
    for error_type, hint in ERROR_HINTS.items():
        if isinstance(error, error_type):
            return hint
    if isinstance(error, FileNotFoundError):
        return "The directory does not exist. Check the path."
    return DEFAULT_HINT


def format_loader_error(error: BaseException, *, include_hint: bool = True) -> str:
    """Format a loader error with optional hint.

    Args:
        error: The raised error.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"ERROR: {error}"
    if isinstance(error, TemplateParseError) and error.reason:
        base = f"{base}\n    {error.reason}"
    if include_hint:
        return f"{base}\n    Hint: {get_error_hint(error)}"
    return base
