"""Multi-source loader for Terraform configuration, state and tfvars."""

import glob
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import NamedTuple, Protocol, runtime_checkable

import structlog
from pydantic import ValidationError

from src.loader.constants import (
    COMPONENT_LOADER,
    DEFAULT_ENVIRONMENT,
    STATE_SOURCE_LOCAL,
    STATE_SOURCE_NONE,
    STATE_SOURCE_REMOTE,
)
from src.loader.errors import (
    CannotOpenFileError,
    ModuleNotFetchedError,
    TemplateParseError,
)
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
from src.settings.app import LoaderSettings
from src.tfstate.models import TFState


class LoaderSnapshot(NamedTuple):
    """Everything loaded so far in a session.

    Attributes:
        templates: Parsed documents by logical file key.
        files: Raw file content by logical file key.
        state: Deployment state (zero value if none was loaded).
        tfvars: Parsed override files in caller order.
    """

    templates: dict[str, Document]
    files: dict[str, bytes]
    state: TFState
    tfvars: list[Document]


@runtime_checkable
class LoaderProtocol(Protocol):
    """Operations a configuration loader exposes to its host."""

    def load_template(self, pattern: str) -> None: ...

    def load_module_file(self, module_key: str, source: str) -> None: ...

    def load_all_template(self, directory: str) -> None: ...

    def dump(self) -> LoaderSnapshot: ...

    def load_state(self) -> None: ...

    def load_tfvars(self, file_paths: Iterable[str]) -> None: ...


class Loader:
    """Loads templates, modules, state and tfvars into one session.

    Template and module loading fail fast and raise LoaderError subclasses,
    leaving files loaded earlier in the same call in place. State and
    tfvars loading never raise; problems are reported only through the
    logger.

    A Loader is not thread-safe. Guard a shared instance with a single lock.
    """

    def __init__(
        self,
        settings: LoaderSettings | None = None,
        logger: structlog.typing.FilteringBoundLogger | None = None,
        template_parser: Parser | None = None,
        tfvars_parsers: Sequence[Parser] | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            settings: Filesystem conventions; defaults to LoaderSettings().
            logger: Diagnostic logger; defaults to a structlog logger.
            template_parser: Parser for templates and module files.
            tfvars_parsers: Parsers tried in order for each tfvars file.
        """
        self._settings = settings or LoaderSettings()
        if logger is None:
            logger = structlog.get_logger().bind(component=COMPONENT_LOADER)
        self._log = logger
        self._template_parser = template_parser or HclParser()
        self._tfvars_parsers: Sequence[Parser] = tfvars_parsers or (
            HclParser(),
            JsonParser(),
        )
        self.store = FileStore()
        self.state = TFState()
        self.tfvars: list[Document] = []
        self.metrics = LoaderMetrics()

    @property
    def templates(self) -> dict[str, Document]:
        """Parsed documents by logical file key."""
        return self.store.templates

    @property
    def files(self) -> dict[str, bytes]:
        """Raw file content by logical file key."""
        return self.store.files

    def load_template(self, pattern: str) -> None:
        """Load every file matching a glob pattern.

        Keys are the cleaned match paths with forward slashes, so
        ``./main.tf`` is stored as ``main.tf``.

        Args:
            pattern: Glob pattern; zero matches is not an error.

        Raises:
            CannotOpenFileError: If a matched file cannot be read.
            TemplateParseError: If a matched file is not valid HCL.
        """
        for file_path in sorted(glob.glob(pattern)):
            key = normalize_key(os.path.normpath(file_path))
            self._load_hcl_file(file_path, key)
            self.metrics.record_template()

    def load_module_file(self, module_key: str, source: str) -> None:
        """Load the files of a fetched module under its source namespace.

        Keys are the module source followed by the file path relative to
        the module cache directory, e.g. ``git::https://example/mod/main.tf``.

        Args:
            module_key: Name of the directory in the module cache.
            source: Module source identifier used as key prefix.

        Raises:
            ModuleNotFetchedError: If the module directory does not exist.
            CannotOpenFileError: If a module file cannot be read.
            TemplateParseError: If a module file is not valid HCL.
        """
        log = self._log.bind(module_source=source, module_key=module_key)
        log.info("loading_module")

        module_path = self._settings.module_path(module_key)
        if not os.path.exists(module_path):
            log.error("module_not_found", module_path=module_path)
            raise ModuleNotFetchedError(source, module_key)

        prefix = normalize_key(module_path)
        pattern = (
            f"{glob.escape(module_path)}/**/*.{self._settings.template_extension}"
        )
        for file_path in sorted(glob.glob(pattern, recursive=True)):
            relative = normalize_key(file_path).replace(prefix, "", 1)
            self._load_hcl_file(file_path, source + relative)
            self.metrics.record_module_file()

    def load_all_template(self, directory: str) -> None:
        """Load every template directly inside a directory.

        Args:
            directory: Directory to scan.

        Raises:
            FileNotFoundError: If the directory does not exist.
            CannotOpenFileError: If a template cannot be read.
            TemplateParseError: If a template is not valid HCL.
        """
        Path(directory).stat()
        self.load_template(
            os.path.join(
                glob.escape(os.path.normpath(directory)),
                f"*.{self._settings.template_extension}",
            )
        )

    def load_state(self) -> None:
        """Load the most relevant deployment state, if any.

        Lookup order is the workspace (or default) local state file, then
        the remote state cache. Missing or invalid state leaves the current
        state untouched.
        """
        settings = self._settings
        local_state_path = settings.local_state_path

        self._log.info("loading_environment")
        try:
            environment = (
                Path(settings.environment_file).read_text(encoding="utf-8").strip()
            )
        except (OSError, UnicodeDecodeError) as e:
            self._log.info(
                "environment_file_unavailable",
                environment_file=settings.environment_file,
                error=str(e),
            )
        else:
            self._log.info("environment_detected", environment=environment)
            if environment and environment != DEFAULT_ENVIRONMENT:
                local_state_path = settings.workspace_state_path(environment)

        self._log.info("loading_state", local_state_path=local_state_path)
        if os.path.exists(local_state_path):
            state_path, source = local_state_path, STATE_SOURCE_LOCAL
        elif os.path.exists(settings.remote_state_path):
            state_path, source = settings.remote_state_path, STATE_SOURCE_REMOTE
        else:
            self._log.info(
                "state_not_found",
                local_state_path=local_state_path,
                remote_state_path=settings.remote_state_path,
            )
            self.metrics.record_state(STATE_SOURCE_NONE, loaded=False)
            return

        log = self._log.bind(state_path=state_path, state_source=source)
        log.info("state_detected")

        try:
            content = Path(state_path).read_bytes()
        except OSError as e:
            log.error("state_read_failed", error=str(e))
            self.metrics.record_state(source, loaded=False)
            return

        try:
            self.state = TFState.model_validate_json(content)
        except ValidationError as e:
            log.error("state_decode_failed", error=str(e))
            self.metrics.record_state(source, loaded=False)
            return

        self.metrics.record_state(source, loaded=True)
        log.info("state_loaded", serial=self.state.serial, lineage=self.state.lineage)

    def load_tfvars(self, file_paths: Iterable[str]) -> None:
        """Load variable override files in the given order.

        Each file is parsed as HCL, then as JSON. Missing or unparseable
        files are skipped.

        Args:
            file_paths: Override files, lowest precedence first.
        """
        self._log.info("loading_tfvars")

        for file_path in file_paths:
            log = self._log.bind(file_path=file_path)
            log.info("loading_tfvars_file")

            if not os.path.exists(file_path):
                log.error("tfvars_file_not_found")
                self.metrics.record_tfvars_skipped()
                continue

            try:
                content = Path(file_path).read_bytes()
            except OSError as e:
                log.error("tfvars_read_failed", error=str(e))
                self.metrics.record_tfvars_skipped()
                continue

            document, failures = parse_first(content, self._tfvars_parsers)
            if document is None:
                for failure in failures:
                    log.error(
                        "tfvars_parse_failed",
                        syntax=failure.syntax,
                        error=failure.message,
                    )
                self.metrics.record_tfvars_skipped()
                continue

            if failures:
                log.debug(
                    "tfvars_parsed_with_fallback",
                    failed_syntaxes=[failure.syntax for failure in failures],
                )
            self.tfvars.append(document)
            self.metrics.record_tfvars_loaded()

    def dump(self) -> LoaderSnapshot:
        """Return the loaded collections without copying them."""
        return LoaderSnapshot(
            templates=self.store.templates,
            files=self.store.files,
            state=self.state,
            tfvars=self.tfvars,
        )

    def _load_hcl_file(self, file_path: str, key: str) -> None:
        """Read, parse and store one template file.

        Raises:
            CannotOpenFileError: If the file cannot be read.
            TemplateParseError: If the file is not valid HCL.
        """
        log = self._log.bind(file_path=file_path, file_key=key)
        log.info("loading_hcl_file")

        try:
            content = Path(file_path).read_bytes()
        except OSError as e:
            log.error("file_read_failed", error=str(e))
            raise CannotOpenFileError(file_path) from e

        try:
            document = self._template_parser.parse(content)
        except ParseFailure as e:
            log.error("hcl_parse_failed", error=e.message)
            raise TemplateParseError(file_path, e.message) from e

        self.store.put(key, document, content)
        log.debug("hcl_file_loaded", size_bytes=len(content))
