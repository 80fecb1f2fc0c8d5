"""Loader settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoaderSettings(BaseSettings):
    """Filesystem conventions and flags for a loader session.

    All paths are relative to the process working directory unless
    given as absolute paths.
    """

    model_config = SettingsConfigDict(
        env_prefix="TFLINT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    template_extension: str = Field(default="tf", min_length=1)
    module_dir: str = ".terraform/modules"
    environment_file: str = ".terraform/environment"
    local_state_path: str = "terraform.tfstate"
    workspace_state_dir: str = "terraform.tfstate.d"
    remote_state_path: str = ".terraform/terraform.tfstate"

    def workspace_state_path(self, environment: str) -> str:
        """Return the state file path for a named workspace."""
        return f"{self.workspace_state_dir}/{environment}/terraform.tfstate"

    def module_path(self, module_key: str) -> str:
        """Return the module cache directory for a module key."""
        return f"{self.module_dir}/{module_key}"


def get_settings() -> LoaderSettings:
    """Get a settings instance."""
    return LoaderSettings()
