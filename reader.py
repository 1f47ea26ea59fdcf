import logging
import os

import yaml

import constants as cv
from errors import ConfigError

logger = logging.getLogger("song_searcher.reader")

USER_SPECS_DATA = cv.USER_SPECS_DATA


def load_user_specs(path=USER_SPECS_DATA):
    """Read the user settings file, returning {} when it is missing or empty

    Raises:
        ConfigError: If the file does not hold a YAML mapping
    """
    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as file:
        try:
            user_specs = yaml.safe_load(file)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse {path}: {exc}") from exc

    if user_specs is None:
        return {}
    if not isinstance(user_specs, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(user_specs).__name__}")
    return user_specs


def ensure_user_specs(path=USER_SPECS_DATA):
    """Create the settings file on first run, asking for the songs file path

    Returns:
        bool: True if a new settings file was written
    """
    if os.path.exists(path):
        return False

    print(f"No settings found, creating {path}")
    songs_csv = input(f"Path to songs file [{cv.DEFAULT_SONGS_CSV}]: ").strip()

    user_specs = {
        "songs_csv": songs_csv or cv.DEFAULT_SONGS_CSV,
        "log_level": cv.DEFAULT_LOG_LEVEL,
    }
    with open(path, "w", encoding="utf-8") as file:
        yaml.safe_dump(user_specs, file, default_flow_style=False)

    logger.info("Wrote default settings to %s", path)
    return True


def get_songs_csv_path(path=USER_SPECS_DATA):
    """Resolve the songs file: environment variable, then settings, then default"""
    env_path = os.environ.get(cv.SONGS_CSV_ENV)
    if env_path:
        logger.debug("Songs file from %s: %s", cv.SONGS_CSV_ENV, env_path)
        return env_path

    user_specs = load_user_specs(path)
    return user_specs.get("songs_csv") or cv.DEFAULT_SONGS_CSV


def get_log_level(path=USER_SPECS_DATA):
    """Return the configured log level name (upper case)

    Raises:
        ConfigError: If the level is not a standard logging level name
    """
    user_specs = load_user_specs(path)
    level = str(user_specs.get("log_level") or cv.DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown log_level in {path}: {level!r}")
    return level
