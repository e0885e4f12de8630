"""Configuration loader.

Loads settings from ~/.geckocfg/config.json, with overrides from
environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .codes.models import CODES_SECTION, ENABLED_SECTION

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".geckocfg" / "config.json"

_FALSE_STRINGS = ("false", "no", "0", "off")


@dataclass
class GeckoConfig:
    """Settings for locating and editing a game's code INI files.

    Attributes:
        global_ini: Shared INI shipped with the game database (read-only here).
        user_ini: The user's INI, where edits are saved.
        codes_section: Section holding code entries.
        enabled_section: Section holding ``$Name`` activation markers.
        bootstrap: Seed the user markers from global defaults on first load.
    """

    global_ini: Path | None = None
    user_ini: Path | None = None
    codes_section: str = CODES_SECTION
    enabled_section: str = ENABLED_SECTION
    bootstrap: bool = True

    def __post_init__(self) -> None:
        """Normalize paths and validate section names."""
        if self.global_ini is not None:
            self.global_ini = Path(self.global_ini).expanduser()
        if self.user_ini is not None:
            self.user_ini = Path(self.user_ini).expanduser()

        if not self.codes_section or not self.enabled_section:
            raise ValueError("Section names cannot be empty")
        if self.codes_section == self.enabled_section:
            raise ValueError("codes_section and enabled_section must differ")


def _parse_bool(value: str) -> bool:
    return value.lower().strip() not in _FALSE_STRINGS


def load_config(config_path: Path | None = None) -> GeckoConfig:
    """Load GeckoConfig from a JSON file.

    The config file should have this structure:
    ```json
    {
      "gecko": {
        "global_ini": "~/dolphin/Sys/GameSettings/GALE01.ini",
        "user_ini": "~/.dolphin/GameSettings/GALE01.ini",
        "codes_section": "Gecko",
        "enabled_section": "Gecko_Enabled",
        "bootstrap": true
      }
    }
    ```

    Args:
        config_path: Path to config file. Uses DEFAULT_CONFIG_PATH if None.

    Returns:
        GeckoConfig instance with loaded values.
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return GeckoConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in %s: %s. Using defaults.", path, e)
        return GeckoConfig()
    except OSError as e:
        logger.warning("Cannot read %s: %s. Using defaults.", path, e)
        return GeckoConfig()

    if not isinstance(data, dict):
        logger.warning("Config in %s is not an object. Using defaults.", path)
        return GeckoConfig()

    return _parse_config(data)


def _parse_config(data: dict[str, Any]) -> GeckoConfig:
    """Parse config dictionary into GeckoConfig, skipping wrong-typed values."""
    gecko_data = data.get("gecko", {})
    if not isinstance(gecko_data, dict):
        gecko_data = {}

    kwargs: dict[str, Any] = {}

    for key in ("global_ini", "user_ini"):
        value = gecko_data.get(key)
        if isinstance(value, str) and value:
            kwargs[key] = Path(value)

    for key in ("codes_section", "enabled_section"):
        value = gecko_data.get(key)
        if isinstance(value, str) and value:
            kwargs[key] = value

    bootstrap = gecko_data.get("bootstrap")
    if isinstance(bootstrap, bool):
        kwargs["bootstrap"] = bootstrap

    try:
        return GeckoConfig(**kwargs)
    except ValueError as e:
        logger.warning("Invalid config: %s. Using defaults.", e)
        return GeckoConfig()


def save_config(config: GeckoConfig, config_path: Path | None = None) -> None:
    """Save GeckoConfig to a JSON file.

    Only values that differ from the defaults are written.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    gecko_data: dict[str, Any] = {}

    if config.global_ini:
        gecko_data["global_ini"] = str(config.global_ini)

    if config.user_ini:
        gecko_data["user_ini"] = str(config.user_ini)

    if config.codes_section != CODES_SECTION:
        gecko_data["codes_section"] = config.codes_section

    if config.enabled_section != ENABLED_SECTION:
        gecko_data["enabled_section"] = config.enabled_section

    if not config.bootstrap:
        gecko_data["bootstrap"] = False

    data: dict[str, Any] = {"gecko": gecko_data} if gecko_data else {}

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        logger.error("Failed to save config to %s: %s", path, e)
        raise


def config_path_from_env() -> Path | None:
    """Config file path from GECKOCFG_CONFIG, if set."""
    value = os.getenv("GECKOCFG_CONFIG")
    return Path(value).expanduser() if value else None


def config_from_env(base: GeckoConfig | None = None) -> GeckoConfig:
    """Apply environment variable overrides on top of ``base``."""
    config = base or GeckoConfig()
    overrides: dict[str, Any] = {}

    global_ini = os.getenv("GECKOCFG_GLOBAL_INI")
    if global_ini:
        overrides["global_ini"] = Path(global_ini)

    user_ini = os.getenv("GECKOCFG_USER_INI")
    if user_ini:
        overrides["user_ini"] = Path(user_ini)

    bootstrap = os.getenv("GECKOCFG_BOOTSTRAP")
    if bootstrap is not None:
        overrides["bootstrap"] = _parse_bool(bootstrap)

    return replace(config, **overrides) if overrides else config
