"""Chunk layout configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any, Tuple
import json
import logging

from .constants import CHUNK_POWER_X, CHUNK_POWER_Y, CHUNK_POWER_Z, MAX_CHUNK_POWER
from .powers import chunk_mask, exponent_for_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChunkLayout:
    """Per-axis chunk exponents (chunk size along an axis is 2**power).

    Attributes:
        power_x: Exponent of the chunk width
        power_y: Exponent of the chunk height
        power_z: Exponent of the chunk depth
    """
    power_x: int = CHUNK_POWER_X
    power_y: int = CHUNK_POWER_Y
    power_z: int = CHUNK_POWER_Z

    @classmethod
    def from_sizes(cls, size_x: int, size_y: int, size_z: int) -> "ChunkLayout":
        """Create a layout from chunk sizes, each a power of two."""
        return cls(
            power_x=exponent_for_size(size_x),
            power_y=exponent_for_size(size_y),
            power_z=exponent_for_size(size_z),
        )

    def validate(self) -> None:
        """Validate the layout."""
        for axis, power in zip("xyz", self.powers):
            if not isinstance(power, int) or isinstance(power, bool):
                raise ValueError(f"power_{axis} must be an integer: {power!r}")
            if power < 0 or power > MAX_CHUNK_POWER:
                raise ValueError(f"power_{axis} must be 0-{MAX_CHUNK_POWER}: {power}")

    @property
    def size_x(self) -> int:
        return 1 << self.power_x

    @property
    def size_y(self) -> int:
        return 1 << self.power_y

    @property
    def size_z(self) -> int:
        return 1 << self.power_z

    @property
    def mask_x(self) -> int:
        return chunk_mask(self.power_x)

    @property
    def mask_y(self) -> int:
        return chunk_mask(self.power_y)

    @property
    def mask_z(self) -> int:
        return chunk_mask(self.power_z)

    @property
    def powers(self) -> Tuple[int, int, int]:
        return (self.power_x, self.power_y, self.power_z)

    @property
    def sizes(self) -> Tuple[int, int, int]:
        return (self.size_x, self.size_y, self.size_z)

    @property
    def masks(self) -> Tuple[int, int, int]:
        return (self.mask_x, self.mask_y, self.mask_z)

    @property
    def volume(self) -> int:
        """Number of blocks in one chunk."""
        return self.size_x * self.size_y * self.size_z

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "power_x": self.power_x,
            "power_y": self.power_y,
            "power_z": self.power_z,
        }

    def save(self, filepath: Path) -> None:
        """Save layout to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug("Saved chunk layout %s to %s", self.sizes, filepath)

    @classmethod
    def load(cls, filepath: Path) -> "ChunkLayout":
        """Load layout from JSON file.

        Raises:
            ValueError: If the file holds an invalid layout
        """
        with open(filepath) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Layout file must hold a JSON object: {filepath}")

        layout = cls(
            power_x=data.get("power_x", CHUNK_POWER_X),
            power_y=data.get("power_y", CHUNK_POWER_Y),
            power_z=data.get("power_z", CHUNK_POWER_Z),
        )
        layout.validate()
        logger.debug("Loaded chunk layout %s from %s", layout.sizes, filepath)
        return layout


DEFAULT_LAYOUT = ChunkLayout()

# Preset layouts for common voxel worlds
PRESET_LAYOUTS = {
    "default": DEFAULT_LAYOUT,
    "cubic16": ChunkLayout(power_x=4, power_y=4, power_z=4),
    "cubic32": ChunkLayout(power_x=5, power_y=5, power_z=5),
    "column16": ChunkLayout(power_x=4, power_y=8, power_z=4),
    "flat": ChunkLayout(power_x=5, power_y=0, power_z=5),
}


def get_preset(name: str) -> Optional[ChunkLayout]:
    """Get a preset layout by name."""
    return PRESET_LAYOUTS.get(name.lower().replace("-", "_").replace(" ", "_"))


def list_presets() -> list[str]:
    """Get list of available preset names."""
    return list(PRESET_LAYOUTS.keys())
