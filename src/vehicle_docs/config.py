"""Configuration model for the command-line driver using Pydantic."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


class DriverConfig(BaseModel):
    """Settings for rendering vehicles from the command line."""

    default_format: Literal["json", "xml"] = Field(
        default="json",
        description="Format used when the requested one is not supported",
    )

    strict: bool = Field(
        default=False,
        description="Fail on unsupported formats instead of falling back",
    )

    fleet_path: Optional[Path] = Field(
        default=None,
        description="YAML fleet file (None = built-in sample vehicles)",
    )

    model_config = {"validate_assignment": True, "extra": "forbid"}

    @classmethod
    def from_yaml(cls, path: Path):
        import yaml

        with open(path) as f:
            return cls(**(yaml.safe_load(f) or {}))

    def save_yaml(self, path: Path):
        import yaml

        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f)
