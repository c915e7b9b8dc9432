"""
Tests for the JSON and YAML mapping of frequency values.
"""

import json

import pytest
import yaml

from rf_module.core.allocation import Allocation, Allocations
from rf_module.core.errors import InvalidFrequencyError
from rf_module.core.frequency_range import Range
from rf_module.core.hz import Hz, KHz, MHz, parse_hz
from rf_module.core.serialization import (
    allocation_from_primitive,
    allocations_from_primitive,
    dumps_json,
    dumps_yaml,
    hz_from_primitive,
    loads_json,
    loads_yaml,
    range_from_primitive,
    to_primitive,
)


@pytest.fixture
def ham_bands():
    return Allocations([
        Allocation(name="2m", range=Range(144 * MHz, 148 * MHz)),
        Allocation(name="70cm", range=Range(420 * MHz, 450 * MHz)),
    ])


class TestToPrimitive:
    """Test conversion to plain data."""

    def test_hz_is_string(self):
        """Frequencies become string tokens."""
        assert to_primitive(parse_hz("144.39MHz")) == "144.39MHz"
        assert Hz(10_000).to_json() == "10kHz"

    def test_range_is_pair(self):
        """Ranges become a pair of tokens."""
        assert to_primitive(Range(-KHz * 3, KHz * 3)) == ["-3kHz", "3kHz"]

    def test_allocation_is_mapping(self):
        """Allocations become name/range mappings."""
        allocation = Allocation(name="2m", range=Range(144 * MHz, 148 * MHz))
        assert to_primitive(allocation) == {"name": "2m", "range": ["144MHz", "148MHz"]}

    def test_nested(self):
        """Containers are converted recursively."""
        data = {"center": Hz(146_520_000), "offsets": [KHz, -KHz], "label": "simplex"}
        assert to_primitive(data) == {
            "center": "146.52MHz",
            "offsets": ["1kHz", "-1kHz"],
            "label": "simplex",
        }

    def test_plain_numbers_untouched(self):
        """Plain floats are not frequencies."""
        assert to_primitive(1.5) == 1.5


class TestFromPrimitive:
    """Test reading plain data back."""

    def test_hz(self):
        """Tokens parse back to Hz."""
        assert hz_from_primitive("144.39MHz") == Hz(144390000)
        assert Hz.from_json("-10Hz") == Hz(-10)

    def test_hz_rejects_numbers(self):
        """Raw numbers are not valid frequency tokens."""
        with pytest.raises(InvalidFrequencyError):
            hz_from_primitive(144390000)

    def test_range(self):
        """Pairs of tokens become ranges."""
        assert range_from_primitive(["144MHz", "148MHz"]) == Range(144 * MHz, 148 * MHz)

    @pytest.mark.parametrize("data", ["144MHz", ["144MHz"], ["1Hz", "2Hz", "3Hz"], None])
    def test_range_shape(self, data):
        """Anything but a pair is rejected."""
        with pytest.raises(ValueError):
            range_from_primitive(data)

    def test_allocation_missing_key(self):
        """Allocations need both name and range."""
        with pytest.raises(ValueError):
            allocation_from_primitive({"name": "2m"})

    def test_allocations_must_be_list(self):
        """Tables must be lists."""
        with pytest.raises(ValueError):
            allocations_from_primitive({"name": "2m"})


class TestDocuments:
    """Test whole JSON and YAML documents."""

    def test_json_roundtrip(self, ham_bands):
        """Tables survive a JSON document."""
        text = dumps_json(ham_bands)
        assert allocations_from_primitive(json.loads(text)) == ham_bands

    def test_json_has_no_raw_numbers(self, ham_bands):
        """Frequencies are written as strings."""
        data = json.loads(dumps_json(ham_bands))
        assert data[0]["range"] == ["144MHz", "148MHz"]

    def test_yaml_hz(self):
        """A single frequency dumps as a YAML string."""
        assert yaml.safe_load(dumps_yaml(parse_hz("144.39MHz"))) == "144.39MHz"

    def test_yaml_roundtrip(self, ham_bands):
        """Tables survive a YAML document."""
        text = dumps_yaml(ham_bands)
        assert allocations_from_primitive(yaml.safe_load(text)) == ham_bands

    def test_loads_json_roundtrip(self, ham_bands):
        """loads_json reads back what dumps_json writes."""
        data = loads_json(dumps_json(ham_bands))
        assert data[1]["range"] == ["420MHz", "450MHz"]
        assert allocations_from_primitive(data) == ham_bands

    def test_loads_yaml_roundtrip(self, ham_bands):
        """loads_yaml reads back what dumps_yaml writes, tokens as strings."""
        data = loads_yaml(dumps_yaml(ham_bands))
        assert data[0]["range"] == ["144MHz", "148MHz"]
        assert allocations_from_primitive(data) == ham_bands

    def test_yaml_keeps_key_order(self, ham_bands):
        """Allocations are written name first."""
        text = dumps_yaml(ham_bands[0])
        assert text.index("name") < text.index("range")
