"""Terraform deployment state models."""

from src.tfstate.models import (
    BackendState,
    InstanceState,
    ModuleState,
    OutputState,
    RemoteState,
    ResourceState,
    TFState,
)


__all__ = [
    "BackendState",
    "InstanceState",
    "ModuleState",
    "OutputState",
    "RemoteState",
    "ResourceState",
    "TFState",
]
