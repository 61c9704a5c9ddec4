"""Configuration management for dependency export."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from .models import DepsFormat


class DepsConfig(BaseModel):
    """Dependency file settings."""

    format: DepsFormat = Field(default=DepsFormat.JSON, description="Output format")
    root: Optional[Path] = Field(
        None, description="Compilation root, defaults to the working directory"
    )
    destination: str = Field(
        default="-", description="Dependency file path, '-' for stdout"
    )


class Config(BaseSettings):
    """Root configuration.

    Values can be overridden with DEPFILE_ environment variables, using a
    double underscore for nested fields (DEPFILE_DEPS__FORMAT=make).
    """

    deps: DepsConfig = Field(default_factory=DepsConfig)
    log_level: str = "WARNING"

    model_config = {
        "extra": "ignore",
        "env_prefix": "DEPFILE_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**data) if data else cls()

    @classmethod
    def default(cls) -> "Config":
        """Return default configuration."""
        return cls()

    def to_yaml(self, path: Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def resolve_root(self) -> Path:
        """Return the configured root, or the working directory."""
        if self.deps.root is not None:
            return self.deps.root.absolute()
        return Path.cwd()
