"""Configuration models for Transmute.

Defines the configuration dataclass shared by the conversion service and
every codec.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from transmute.core.models import DEFAULT_MAX_DEPTH


@dataclass
class ConversionConfig:
    """Configuration for a conversion job.

    Attributes:
        source_format: Source format hint (CLI falls back to detection).
        target_format: Target format hint.
        pretty_print: Indent JSON and XML output; compact when False.
        max_depth: Deepest container nesting decoders and encoders accept.
    """

    # Format hints
    source_format: str | None = None
    target_format: str | None = None

    # Output options
    pretty_print: bool = True

    # Limits
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ConversionConfig":
        """Load configuration from a YAML file.

        Example YAML:
            source_format: csv
            target_format: json
            pretty_print: false
            max_depth: 64

        Args:
            path: Path to YAML config file.

        Returns:
            ConversionConfig instance.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConversionConfig":
        """Create config from a dictionary. Unknown keys are ignored.

        Args:
            data: Configuration dictionary.

        Returns:
            ConversionConfig instance.
        """
        return cls(
            source_format=data.get("source_format"),
            target_format=data.get("target_format"),
            pretty_print=bool(data.get("pretty_print", True)),
            max_depth=int(data.get("max_depth", DEFAULT_MAX_DEPTH)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary for serialization."""
        result: dict[str, Any] = {}

        if self.source_format:
            result["source_format"] = self.source_format
        if self.target_format:
            result["target_format"] = self.target_format
        if not self.pretty_print:
            result["pretty_print"] = False
        if self.max_depth != DEFAULT_MAX_DEPTH:
            result["max_depth"] = self.max_depth

        return result

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to output YAML file.
        """
        path = Path(path)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
