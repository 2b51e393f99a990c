"""Configuration loading: config file, environment and command line overrides."""

from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from pydantic import ValidationError
from pydantic_settings import EnvSettingsSource

from ..errors import ConfigurationError
from .settings import Settings

logger = structlog.get_logger(__name__)


def load_config_file(config_file: Path) -> Dict[str, Any]:
    """Read settings from a YAML file holding a mapping of setting names."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {config_file}: {e.strerror}",
            config_key="config_file",
            previous_error=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_file}",
            config_key="config_file",
            previous_error=e,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_file} must contain a mapping", config_key="config_file"
        )

    # Allow dashed keys as on the command line, e.g. "fail-on"
    data = {str(k).replace("-", "_"): v for k, v in data.items()}
    unknown = sorted(set(data) - set(Settings.model_fields))
    if unknown:
        raise ConfigurationError(
            f"Unknown setting(s) in {config_file}: {', '.join(unknown)}",
            config_key=unknown[0],
        )
    return data


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> Settings:
    """Build settings. Precedence: overrides > environment > config file > defaults.

    Args:
        config_file: Optional YAML config file
        **overrides: Setting values from the command line; ``None`` means unset

    Returns:
        Validated Settings
    """
    values: Dict[str, Any] = {}
    if config_file is not None:
        values.update(load_config_file(Path(config_file)))
        logger.debug("Loaded config file", file=str(config_file), keys=sorted(values))

    try:
        # Only the fields present in the environment
        values.update(EnvSettingsSource(Settings)())
        values.update({k: v for k, v in overrides.items() if v is not None})
        settings = Settings(**values)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(loc) for loc in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid setting {key}: {first.get('msg')}" if key else f"Invalid settings: {e}",
            config_key=key,
            previous_error=e,
        ) from e

    logger.debug("Configuration loaded", **settings.model_dump(mode="json"))
    return settings
