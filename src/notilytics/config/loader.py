"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from notilytics.config.models import NotilyticsConfig


def load_config(path: Path | str) -> NotilyticsConfig:
    """Load configuration from YAML file.

    An empty file yields the default configuration.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated NotilyticsConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return NotilyticsConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to the repo-level default config file.

    This module lives at ``src/notilytics/config/loader.py``, so the repository
    root is four parents up and the file is ``<root>/configs/default.yaml``.
    """
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
