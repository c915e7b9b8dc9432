"""
Band plan configuration.

A band plan is a named table of allocations that can be saved to and loaded
from a JSON or YAML file, with frequencies written as string tokens.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .allocation import SI_BANDS, Allocation, Allocations
from .itu import ITU_BANDS
from .serialization import (
    allocations_from_primitive,
    dumps_json,
    dumps_yaml,
    loads_json,
    loads_yaml,
    to_primitive,
)

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigValidationError(ValueError):
    """Raised when band plan values are invalid."""

    pass


@dataclass
class BandPlanConfig:
    """A named table of frequency allocations."""

    name: str = "custom"
    allocations: List[Allocation] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration fields."""
        if not isinstance(self.name, str):
            raise ConfigValidationError(
                f"band plan name must be a string, got {self.name!r}"
            )
        if not self.name:
            raise ConfigValidationError("band plan name must not be empty")
        for allocation in self.allocations:
            if not isinstance(allocation, Allocation):
                raise ConfigValidationError(
                    f"allocations must be Allocation values, got {allocation!r}"
                )
            if not allocation.name:
                raise ConfigValidationError(
                    f"allocation name must not be empty: {allocation}"
                )

    @property
    def table(self) -> Allocations:
        """The allocations as a queryable table."""
        return Allocations(self.allocations)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {"name": self.name, "allocations": to_primitive(self.allocations)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BandPlanConfig":
        """Create configuration from dictionary."""
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"band plan must be a mapping, got {type(data).__name__}"
            )
        allocations = allocations_from_primitive(data.get("allocations", []))
        return cls(name=data.get("name", "custom"), allocations=list(allocations))

    def save(self, path: str) -> bool:
        """Save configuration to a JSON or YAML file.

        The format follows the file suffix: .yaml/.yml for YAML, anything
        else for JSON.

        Args:
            path: File path to save configuration to

        Returns:
            True if saved successfully, False otherwise
        """
        try:
            if Path(path).suffix.lower() in YAML_SUFFIXES:
                text = dumps_yaml(self.to_dict())
            else:
                text = dumps_json(self.to_dict())
            with open(path, "w") as f:
                f.write(text)
            logger.info(f"Band plan '{self.name}' saved to {path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save band plan to {path}: {e}")
            return False
        except (TypeError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to serialize band plan: {e}")
            return False

    @classmethod
    def load(cls, path: str) -> Optional["BandPlanConfig"]:
        """Load configuration from a JSON or YAML file.

        Args:
            path: File path to load configuration from

        Returns:
            BandPlanConfig instance or None if loading failed
        """
        try:
            with open(path, "r") as f:
                text = f.read()
            if Path(path).suffix.lower() in YAML_SUFFIXES:
                data = loads_yaml(text)
            else:
                data = loads_json(text)
            config = cls.from_dict(data)
            logger.info(
                f"Band plan '{config.name}' loaded from {path} "
                f"({len(config.allocations)} allocations)"
            )
            return config
        except FileNotFoundError:
            logger.warning(f"Band plan file not found: {path}")
            return None
        except OSError as e:
            logger.error(f"Failed to read band plan from {path}: {e}")
            return None
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in band plan file {path}: {e}")
            return None
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in band plan file {path}: {e}")
            return None
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Invalid band plan format in {path}: {e}")
            return None

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get default band plan file path."""
        config_dir = Path.home() / ".config" / "rf_module"
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir / "bandplan.json"

    def save_default(self) -> None:
        """Save to default band plan path."""
        self.save(str(self.get_default_config_path()))

    @classmethod
    def load_default(cls) -> "BandPlanConfig":
        """Load from default path, or fall back to the ITU plan if not found or invalid."""
        path = cls.get_default_config_path()
        if path.exists():
            config = cls.load(str(path))
            if config is not None:
                return config
            logger.warning("Using ITU band plan due to load failure")
        return create_preset_itu()


# Preset band plans built from the fixed tables
PRESETS: Dict[str, BandPlanConfig] = {}


def create_preset_itu() -> BandPlanConfig:
    """ITU radio bands, ELF through EHF."""
    return BandPlanConfig(name="itu", allocations=list(ITU_BANDS))


def create_preset_si() -> BandPlanConfig:
    """SI magnitude bands, KHz through GHz."""
    return BandPlanConfig(name="si", allocations=list(SI_BANDS))


# Register presets
PRESETS["itu"] = create_preset_itu()
PRESETS["si"] = create_preset_si()


def get_preset(name: str) -> Optional[BandPlanConfig]:
    """Get a preset band plan by name."""
    return PRESETS.get(name)


def list_presets() -> List[str]:
    """List available preset names."""
    return list(PRESETS.keys())
