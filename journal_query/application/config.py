"""Configuration management using Pydantic."""

import json
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from journal_query.domain import catalog


class Config(BaseSettings):
    """Main configuration class."""

    # Query defaults
    default_interval: str = Field(default="boot", description="Interval preselected for new queries")
    range_lookback_hours: int = Field(
        default=24, ge=0, description="Hours before now suggested as the start of a new range"
    )

    # journalctl rendering
    journalctl_binary: str = "journalctl"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Development
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="JOURNAL_QUERY_",
        env_file=".env",
        case_sensitive=False,
    )

    @field_validator("default_interval")
    @classmethod
    def _known_interval(cls, value: str) -> str:
        catalog.interval_option(value)
        return value

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a file."""
        if config_path.suffix.lower() == '.json':
            with open(config_path) as f:
                data = json.load(f)
        elif config_path.suffix.lower() in ['.yaml', '.yml']:
            import yaml
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        else:
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.suffix.lower() == '.json':
            with open(config_path, 'w') as f:
                json.dump(self.model_dump(mode="json"), f, indent=2)
        elif config_path.suffix.lower() in ['.yaml', '.yml']:
            import yaml
            with open(config_path, 'w') as f:
                yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)
        else:
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")
