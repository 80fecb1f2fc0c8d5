"""Unit tests for Terraform state models."""

import pytest
from pydantic import ValidationError

from src.tfstate.models import TFState


STATE_JSON = b"""{
  "version": 3,
  "terraform_version": "0.9.8",
  "serial": 7,
  "lineage": "8f2a-lineage",
  "backend": {"type": "s3", "config": {"bucket": "tf-state"}, "hash": 42},
  "modules": [
    {
      "path": ["root"],
      "outputs": {"ip": {"sensitive": false, "type": "string", "value": "10.0.0.1"}},
      "resources": {
        "aws_instance.web": {
          "type": "aws_instance",
          "depends_on": [],
          "primary": {
            "id": "i-0123",
            "attributes": {"id": "i-0123", "instance_type": "t2.micro"},
            "meta": {},
            "tainted": false
          },
          "deposed": [],
          "provider": ""
        }
      },
      "depends_on": []
    },
    {"path": ["root", "network"], "resources": {}}
  ]
}"""


class TestTFState:
    """Tests for TFState."""

    @pytest.mark.unit
    def test_zero_value_is_empty(self) -> None:
        """Test that a default state is empty."""
        state = TFState()
        assert state.is_empty()
        assert state.modules == []
        assert state.root_module() is None

    @pytest.mark.unit
    def test_parses_legacy_state(self) -> None:
        """Test that a legacy state document deserializes."""
        state = TFState.model_validate_json(STATE_JSON)

        assert not state.is_empty()
        assert state.version == 3
        assert state.serial == 7
        assert state.lineage == "8f2a-lineage"
        assert state.backend is not None
        assert state.backend.type == "s3"
        assert len(state.modules) == 2

    @pytest.mark.unit
    def test_root_module_resources(self) -> None:
        """Test access to resources and outputs of the root module."""
        state = TFState.model_validate_json(STATE_JSON)

        root = state.root_module()
        assert root is not None
        assert root.outputs["ip"].value == "10.0.0.1"

        resource = root.resources["aws_instance.web"]
        assert resource.primary is not None
        assert resource.primary.id == "i-0123"
        assert "aws_instance.db" not in root.resources
        assert state.modules[1].resources == {}

    @pytest.mark.unit
    def test_unknown_fields_are_ignored(self) -> None:
        """Test that fields from newer state formats are tolerated."""
        state = TFState.model_validate_json(
            b'{"version": 4, "serial": 1, "lineage": "x", "resources": [], "outputs": {}}'
        )
        assert state.version == 4
        assert state.modules == []

    @pytest.mark.unit
    def test_invalid_json_raises(self) -> None:
        """Test that malformed JSON raises ValidationError."""
        with pytest.raises(ValidationError):
            TFState.model_validate_json(b"{not json")

    @pytest.mark.unit
    def test_wrong_type_raises(self) -> None:
        """Test that a schema mismatch raises ValidationError."""
        with pytest.raises(ValidationError):
            TFState.model_validate_json(b'{"modules": "oops"}')
