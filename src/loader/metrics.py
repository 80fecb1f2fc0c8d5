"""Metrics collection for a loader session."""

from dataclasses import dataclass

from src.loader.constants import STATE_SOURCE_NONE


@dataclass
class LoaderMetrics:
    """Counters for one loader session.

    Attributes:
        templates_loaded_total: Root-project files stored.
        module_files_loaded_total: Module files stored.
        tfvars_loaded_total: Override files parsed and kept.
        tfvars_skipped_total: Override files missing or unparseable.
        state_source: Where state was read from (local, remote, none).
        state_loaded: Whether state deserialized successfully.
    """

    templates_loaded_total: int = 0
    module_files_loaded_total: int = 0
    tfvars_loaded_total: int = 0
    tfvars_skipped_total: int = 0
    state_source: str = STATE_SOURCE_NONE
    state_loaded: bool = False

    def record_template(self) -> None:
        """Record a root-project file load."""
        self.templates_loaded_total += 1

    def record_module_file(self) -> None:
        """Record a module file load."""
        self.module_files_loaded_total += 1

    def record_tfvars_loaded(self) -> None:
        """Record a kept override file."""
        self.tfvars_loaded_total += 1

    def record_tfvars_skipped(self) -> None:
        """Record a skipped override file."""
        self.tfvars_skipped_total += 1

    def record_state(self, source: str, *, loaded: bool) -> None:
        """Record the outcome of state loading.

        Args:
            source: State source identifier.
            loaded: Whether deserialization succeeded.
        """
        self.state_source = source
        self.state_loaded = loaded

    def to_dict(self) -> dict[str, int | str | bool]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "templates_loaded_total": self.templates_loaded_total,
            "module_files_loaded_total": self.module_files_loaded_total,
            "tfvars_loaded_total": self.tfvars_loaded_total,
            "tfvars_skipped_total": self.tfvars_skipped_total,
            "state_source": self.state_source,
            "state_loaded": self.state_loaded,
        }
