"""Configuration loader for templates, modules, state and tfvars.

This module provides:
- Template and module discovery with logical file keys
- Deployment state lookup across workspace, local and remote locations
- Variable override loading with HCL and JSON fallback
"""

from src.loader.error_hints import format_loader_error, get_error_hint
from src.loader.errors import (
    CannotOpenFileError,
    LoaderError,
    ModuleNotFetchedError,
    TemplateParseError,
)
from src.loader.loader import Loader, LoaderProtocol, LoaderSnapshot
from src.loader.metrics import LoaderMetrics
from src.loader.parsers import (
    Document,
    HclParser,
    JsonParser,
    ParseFailure,
    Parser,
    parse_first,
)
from src.loader.store import FileStore, normalize_key


__all__ = [
    "CannotOpenFileError",
    "Document",
    "FileStore",
    "HclParser",
    "JsonParser",
    "Loader",
    "LoaderError",
    "LoaderMetrics",
    "LoaderProtocol",
    "LoaderSnapshot",
    "ModuleNotFetchedError",
    "ParseFailure",
    "Parser",
    "TemplateParseError",
    "format_loader_error",
    "get_error_hint",
    "normalize_key",
    "parse_first",
]
