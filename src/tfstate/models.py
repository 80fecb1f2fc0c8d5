"""Data models for Terraform deployment state.

The models mirror the legacy (pre-0.12) ``terraform.tfstate`` layout.
Unknown fields are ignored so newer state files still deserialize.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RemoteState(BaseModel):
    """Remote state configuration recorded by ``terraform remote config``."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    config: dict[str, Any] = Field(default_factory=dict)


class BackendState(BaseModel):
    """Backend configuration recorded by ``terraform init``."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    config: dict[str, Any] = Field(default_factory=dict)
    hash: int = 0


class OutputState(BaseModel):
    """A single module output."""

    model_config = ConfigDict(extra="ignore")

    sensitive: bool = False
    type: str = ""
    value: Any = None


class InstanceState(BaseModel):
    """A single resource instance."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)
    meta: dict[str, Any] = Field(default_factory=dict)
    tainted: bool = False


class ResourceState(BaseModel):
    """A resource tracked in a module."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    depends_on: list[str] = Field(default_factory=list)
    primary: InstanceState | None = None
    deposed: list[InstanceState] = Field(default_factory=list)
    provider: str = ""


class ModuleState(BaseModel):
    """State of one module, addressed by its path from the root."""

    model_config = ConfigDict(extra="ignore")

    path: list[str] = Field(default_factory=list)
    outputs: dict[str, OutputState] = Field(default_factory=dict)
    resources: dict[str, ResourceState] = Field(default_factory=dict)
    depends_on: list[str] = Field(default_factory=list)

    def is_root(self) -> bool:
        """Check whether this is the root module."""
        return self.path == ["root"]


class TFState(BaseModel):
    """Deserialized Terraform state.

    A default-constructed instance is the zero value used before any
    state file has been loaded.
    """

    model_config = ConfigDict(extra="ignore")

    version: int = 0
    terraform_version: str = ""
    serial: int = 0
    lineage: str = ""
    remote: RemoteState | None = None
    backend: BackendState | None = None
    modules: list[ModuleState] = Field(default_factory=list)

    def is_empty(self) -> bool:
        """Check whether no state has been loaded into this instance."""
        return self == TFState()

    def root_module(self) -> ModuleState | None:
        """Return the root module state, if present."""
        for module in self.modules:
            if module.is_root():
                return module
        return None
