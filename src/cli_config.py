"""CLI configuration: YAML defaults, environment overrides and CLI flags.

Precedence, highest first: CLI flag, environment (NUSPECREAD_LOG_LEVEL,
NUSPECREAD_STRICT), YAML config file, built-in Constants. A config file that
cannot be read is logged and ignored so the CLI still runs on defaults.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def find_config_file(explicit_path: Optional[str] = None) -> Optional[str]:
    """Return the config file to load, or None when there is none.

    An explicit path is returned as given (even if missing, so the loader can
    warn about it); otherwise the first existing default location wins.
    """
    if explicit_path:
        return explicit_path
    for candidate in Constants.CONFIG_SEARCH_PATHS:
        path = os.path.expanduser(candidate)
        if os.path.isfile(path):
            return path
    return None


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a YAML config file.

    Args:
        config_path: Path to YAML config file.

    Returns:
        Config mapping; empty when the file is missing or unreadable.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return {}

    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Ignoring config file %s: top level is not a mapping", config_path)
        return {}
    return data


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return None


def _as_log_level(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip().upper() in Constants.LOG_LEVELS:
        return value.strip().upper()
    return None


def _as_output_format(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip().lower() in Constants.SUPPORTED_FORMATS:
        return value.strip().lower()
    return None


def resolve_settings(args, config: Optional[Dict[str, Any]] = None, environ=None) -> Dict[str, Any]:
    """Merge defaults, YAML config, environment and CLI flags into runtime settings.

    Args:
        args: Parsed CLI namespace (STRICT, LOG_LEVEL, OUTPUT_FORMAT).
        config: Mapping from ``load_config``.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        dict with ``strict`` (bool), ``log_level`` (str) and ``output_format`` (str).
    """
    config = config or {}
    environ = os.environ if environ is None else environ

    settings: Dict[str, Any] = {
        "strict": Constants.STRICT_DEPENDENCY_VERSIONS,
        "log_level": "INFO",
        "output_format": Constants.OUTPUT_FORMAT,
    }

    # YAML
    strict = _as_bool(config.get("strict"))
    if strict is not None:
        settings["strict"] = strict
    elif "strict" in config:
        logger.warning("Ignoring invalid 'strict' config value: %r", config.get("strict"))
    level = _as_log_level(config.get("log_level"))
    if level is not None:
        settings["log_level"] = level
    output_format = _as_output_format(config.get("output_format"))
    if output_format is not None:
        settings["output_format"] = output_format

    # Environment
    strict = _as_bool(environ.get(Constants.ENV_STRICT))
    if strict is not None:
        settings["strict"] = strict
    level = _as_log_level(environ.get(Constants.ENV_LOG_LEVEL))
    if level is not None:
        settings["log_level"] = level

    # CLI
    if getattr(args, "STRICT", False):
        settings["strict"] = True
    level = _as_log_level(getattr(args, "LOG_LEVEL", None))
    if level is not None:
        settings["log_level"] = level
    output_format = _as_output_format(getattr(args, "OUTPUT_FORMAT", None))
    if output_format is not None:
        settings["output_format"] = output_format

    return settings
