"""
Unit Tests for Serialization Utilities

Tests for packet serialization and deserialization.
"""

import json

import pytest

from packet_toolkit.core.models import Packet
from packet_toolkit.core.schemas.validator import ValidationError
from packet_toolkit.core.utils.serialization import deserialize_packet, serialize_packet


class TestPacketSerialization:
    """Tests for packet serialization/deserialization."""

    def test_serialize_when_packet_given_then_json_compatible(self, sample_packet):
        """serialize_packet output survives a JSON dump."""
        result = serialize_packet(sample_packet)

        assert json.loads(json.dumps(result)) == result
        assert result["problems"][1].get("description") is None

    def test_deserialize_when_serialized_then_equal(self, sample_packet):
        """Deserializing serialized data gives an equal packet."""
        assert deserialize_packet(serialize_packet(sample_packet)) == sample_packet

    def test_deserialize_when_invalid_then_raises_validation_error(self):
        """Validation runs before models are built."""
        with pytest.raises(ValidationError):
            deserialize_packet({"title": "T", "problems": [{"tests": []}]})

    def test_deserialize_when_validation_skipped_then_model_error_wrapped(self):
        """Model errors surface as ValidationError too."""
        with pytest.raises(ValidationError, match="Failed to build packet"):
            deserialize_packet({"title": "  "}, validate=False)

    def test_deserialize_when_minimal_then_defaults(self):
        """Only the title is required."""
        assert deserialize_packet({"title": "T"}) == Packet(title="T")
