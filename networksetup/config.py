"""
Configuration management for networksetup.

This module holds the constants shared by the command builders and the
runner, and loads the optional settings file used by the command line tool.
"""

import toml
from pathlib import Path

# --- App Constants ---
APP_NAME = "networksetup"
CONFIG_FILENAME = "config.toml"

# --- Logging Constants ---
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Tool Constants ---
DEFAULT_NETWORKSETUP_PATH = "networksetup"
SUDO_PATH = "sudo"

# --- Argument Tokens ---
ON = "on"
OFF = "off"
EMPTY = "Empty"  # networksetup clears a list when given this token

# Default settings for the command line tool
DEFAULT_CONFIG = {
    "settings": {
        "debug": False,
        "sudo": False,
        "networksetup_path": DEFAULT_NETWORKSETUP_PATH,
        "log_file": "",
    },
}


def get_config_path():
    """Gets the path to the configuration file."""
    return Path.home() / ".config" / APP_NAME / CONFIG_FILENAME


def load_config(path=None):
    """Loads the configuration from the TOML file, falling back to defaults."""
    path = Path(path) if path else get_config_path()

    settings = dict(DEFAULT_CONFIG["settings"])
    if not path.exists():
        return {"settings": settings}

    with open(path, "r") as f:
        loaded = toml.load(f)

    settings.update(loaded.get("settings", {}))

    from .logging_config import get_logger

    get_logger(__name__).debug(f"Loaded settings from {path}: {settings}")
    return {"settings": settings}

