"""
Loading of the maintenance API connection settings.

The config file is a small JSON document::

    {"BaseURL": "https://monitoring.example.com/api/maintenance/",
     "API-KEY": "secret",
     "Owners": "ops-team"}

Keys that are missing fall back to empty strings; only an unreadable file or
a document that does not parse is treated as an error.
"""

import json
from pathlib import Path
from typing import Union

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigError
from .models import Settings

DEFAULT_CONFIG_PATH = "/etc/fds/icinga.json"


def load_settings(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Read connection settings from a JSON config file.

    Args:
        config_path: Path to the JSON config file

    Returns:
        Immutable Settings instance

    Raises:
        ConfigError: If the file cannot be opened or parsed
    """
    config_path = Path(config_path)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise ConfigError(f"Parse json failed - {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot open config file {config_path} - {e}") from e

    try:
        data = json.loads(content)
        settings = Settings.model_validate(data)
    except (ValueError, PydanticValidationError) as e:
        raise ConfigError(f"Parse json failed - {e}") from e

    logger.debug(f"Loaded settings from {config_path} (base URL: {settings.base_url!r}, owner: {settings.owner!r})")
    return settings
