"""ABOUTME: Configuration loaders for external data sources.
ABOUTME: Handles loading and parsing of sources.yml configuration."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from dexsearch.settings import settings


class SourcesConfig(BaseModel):
    """Where the dataset CSV files are downloaded from."""

    base_url: str
    files: dict[str, str]

    def get_file_url(self, name: str) -> str:
        """Generate the download URL for a configured dataset file.

        Args:
            name: Name of the file as defined in the config (e.g. "species").

        Returns:
            Full URL of the file.

        Raises:
            KeyError: If name is not configured.
        """
        if name not in self.files:
            raise KeyError(f"Dataset file '{name}' not found in configuration")

        return f"{self.base_url.rstrip('/')}/{self.files[name]}"

    def get_file_names(self) -> list[str]:
        """Return list of configured dataset file names."""
        return list(self.files.keys())


def load_sources_config(config_path: Path | None = None) -> SourcesConfig:
    """Load sources configuration from YAML file.

    Args:
        config_path: Path to the config file. Defaults to settings.sources_config_path.

    Returns:
        Parsed SourcesConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    if config_path is None:
        config_path = settings.sources_config_path

    if not config_path.exists():
        raise FileNotFoundError(f"Sources config not found: {config_path}")

    with config_path.open() as f:
        raw_config = yaml.safe_load(f)

    return SourcesConfig.model_validate(raw_config)
