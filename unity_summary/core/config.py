"""Configuration management for unity-summary."""

import json
from pathlib import Path
from typing import Optional

import yaml  # type: ignore
from pydantic import BaseModel, Field  # type: ignore

from .discovery import DEFAULT_PATTERN


class SummaryConfig(BaseModel):
    """Configuration for a summary run."""

    results_dir: str = Field(default="./", description="Directory searched for result files")
    root: Optional[str] = Field(None, description="Prefix for displayed outcome lines")
    pattern: str = Field(default=DEFAULT_PATTERN, description="Filename glob for result files")
    output: Optional[str] = Field(None, description="Also write the report to this file")
    verbose: bool = Field(default=False, description="Enable debug logging")

    @classmethod
    def from_file(cls, config_path: str) -> "SummaryConfig":
        """Load configuration from a YAML or JSON file."""
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

        return cls(**(data or {}))

    def save(self, config_path: str) -> None:
        """Save configuration to file."""
        path = Path(config_path)
        data = self.model_dump()

        with open(path, "w", encoding="utf-8") as f:
            if path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(data, f, default_flow_style=False, indent=2)
            else:
                json.dump(data, f, indent=2)
