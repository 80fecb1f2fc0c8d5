"""Domain exceptions for the configuration loader.

Only template and module loading raise these; state and tfvars loading
report problems through the diagnostic logger instead.
"""


class LoaderError(Exception):
    """Base exception for all fatal loader errors.

    A failed load call may leave files loaded earlier in the same call
    in the store.
    """


class CannotOpenFileError(LoaderError):
    """Raised when a discovered file cannot be read."""

    def __init__(self, path: str) -> None:
        """Initialize the error.

        Args:
            path: Path of the unreadable file.
        """
        self.path = path
        super().__init__(f"Cannot open file {path}")


class TemplateParseError(LoaderError):
    """Raised when a template is not valid HCL."""

    def __init__(self, path: str, reason: str = "") -> None:
        """Initialize the error.

        Args:
            path: Path of the file that failed to parse.
            reason: Parser error message.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Parse error occurred by {path}")


class ModuleNotFetchedError(LoaderError):
    """Raised when a module is missing from the module cache.

    This usually means modules were never fetched for the project.
    """

    def __init__(self, source: str, module_key: str) -> None:
        """Initialize the error.

        Args:
            source: Module source identifier.
            module_key: Key of the module cache directory.
        """
        self.source = source
        self.module_key = module_key
        super().__init__(
            f"module `{source}` not found. Did you run `terraform get`?"
        )
