"""
JSON and YAML mapping of frequency values.

A frequency always travels as a single string token ("144.39MHz"), never as
a raw number, so documents stay readable and parse back to the same Hz. A
Range is a two-element list of tokens and an Allocation is a mapping with
``name`` and ``range`` keys.
"""

import json
from typing import Any, Mapping, Sequence

import yaml

from .allocation import Allocation, Allocations
from .frequency_range import Range
from .hz import Hz


def to_primitive(obj: Any) -> Any:
    """
    Convert frequency values into plain JSON/YAML-compatible data.

    Hz become string tokens; containers are converted recursively and
    anything else is returned unchanged.
    """
    if isinstance(obj, Hz):
        return obj.to_json()
    if isinstance(obj, Range):
        return [obj.low.to_json(), obj.high.to_json()]
    if isinstance(obj, Allocation):
        return {"name": obj.name, "range": to_primitive(obj.range)}
    if isinstance(obj, Mapping):
        return {key: to_primitive(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_primitive(item) for item in obj]
    return obj


def hz_from_primitive(data: Any) -> Hz:
    """Read a frequency token."""
    return Hz.from_json(data)


def range_from_primitive(data: Any) -> Range:
    """Read a ``[low, high]`` pair of frequency tokens."""
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence) or len(data) != 2:
        raise ValueError(f"range must be a [low, high] pair, got {data!r}")
    return Range(hz_from_primitive(data[0]), hz_from_primitive(data[1]))


def allocation_from_primitive(data: Any) -> Allocation:
    """Read a ``{name, range}`` mapping."""
    if not isinstance(data, Mapping):
        raise ValueError(f"allocation must be a mapping, got {data!r}")
    try:
        name = data["name"]
        range_data = data["range"]
    except KeyError as e:
        raise ValueError(f"allocation is missing key {e}") from e
    return Allocation(name=str(name), range=range_from_primitive(range_data))


def allocations_from_primitive(data: Any) -> Allocations:
    """Read a list of allocation mappings, keeping their order."""
    if not isinstance(data, list):
        raise ValueError(f"allocations must be a list, got {type(data).__name__}")
    return Allocations(allocation_from_primitive(item) for item in data)


def dumps_json(obj: Any, indent: int = 2) -> str:
    """Serialize frequency values to a JSON document."""
    return json.dumps(to_primitive(obj), indent=indent)


def loads_json(text: str) -> Any:
    """Read a JSON document into plain data; frequencies stay string tokens."""
    return json.loads(text)


class RFDumper(yaml.SafeDumper):
    """YAML dumper that writes frequency values as string tokens."""

    pass


def _represent_hz(dumper: yaml.SafeDumper, value: Hz) -> yaml.Node:
    return dumper.represent_str(value.to_json())


def _represent_range(dumper: yaml.SafeDumper, value: Range) -> yaml.Node:
    return dumper.represent_list([value.low, value.high])


def _represent_allocation(dumper: yaml.SafeDumper, value: Allocation) -> yaml.Node:
    return dumper.represent_dict({"name": value.name, "range": value.range})


def _represent_allocations(dumper: yaml.SafeDumper, value: Allocations) -> yaml.Node:
    return dumper.represent_list(list(value))


RFDumper.add_representer(Hz, _represent_hz)
RFDumper.add_representer(Range, _represent_range)
RFDumper.add_representer(Allocation, _represent_allocation)
RFDumper.add_representer(Allocations, _represent_allocations)


def dumps_yaml(obj: Any) -> str:
    """Serialize frequency values to a YAML document."""
    return yaml.dump(obj, Dumper=RFDumper, sort_keys=False)


def loads_yaml(text: str) -> Any:
    """Read a YAML document into plain data; frequencies stay string tokens."""
    return yaml.safe_load(text)
