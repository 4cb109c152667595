"""
Configuration for geojson-wind.

Settings come from the environment, after loading a ``.env`` file from the
current working directory if one exists. Command-line flags override them.
"""

import copy
import os
from pathlib import Path

from dotenv import load_dotenv


def load_environment(env_file=None):
    """Load a .env file (default: ./.env) into the process environment."""
    env_file = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        return True
    return False


def _get_env_bool(name, default):
    val = os.environ.get(name)
    if val is None:
        return default
    lowered = val.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise RuntimeError(f"Environment variable '{name}' must be a boolean, got: {val!r}")


def _get_env_int(name, default):
    val = os.environ.get(name)
    if val is None:
        return default
    try:
        parsed = int(val)
    except ValueError:
        raise RuntimeError(f"Environment variable '{name}' must be an integer, got: {val!r}")
    if parsed < 1:
        raise RuntimeError(f"Environment variable '{name}' must be at least 1, got: {parsed}")
    return parsed


def _get_env_log_level(name, default):
    val = os.environ.get(name, default).strip().upper()
    if val not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise RuntimeError(f"Environment variable '{name}' is not a log level: {val!r}")
    return val


def default_max_workers():
    # Same default as ThreadPoolExecutor
    return min(32, (os.cpu_count() or 1) + 4)


def build_config():
    """Read the current environment into a configuration dict."""
    return {
        "processing": {
            "parallel": _get_env_bool("GEOJSON_WIND_PARALLEL", True),
            "max_workers": _get_env_int("GEOJSON_WIND_MAX_WORKERS", default_max_workers()),
        },
        "output": {
            "pretty": False,
            "stats_only": False,
        },
        "logging": {
            "level": _get_env_log_level("GEOJSON_WIND_LOG_LEVEL", "WARNING"),
            "format": "%(asctime)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }


load_environment()

DEFAULT_CONFIG = build_config()


def get_config():
    """
    Get a copy of the default configuration.
    Modifying the returned dict won't affect the default.
    """
    return copy.deepcopy(DEFAULT_CONFIG)
