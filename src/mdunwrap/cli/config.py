#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the mdunwrap CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, reading ``MDUNWRAP_*`` environment
variables, and merging the layers with proper priority handling.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from dataclasses import fields
from typing import Any, Dict, Mapping, Optional

import yaml

from mdunwrap.constants import CONFIG_FILENAMES, ENV_PREFIX, PYPROJECT_SECTION
from mdunwrap.options.markdown import MarkdownParserOptions, UnwrapRendererOptions

logger = logging.getLogger(__name__)

# Option classes whose fields may be set from config files and the environment.
CONFIGURABLE_OPTIONS = (MarkdownParserOptions, UnwrapRendererOptions)

# Environment variable naming the config file to load.
CONFIG_ENV_VAR = f"{ENV_PREFIX}CONFIG"


def get_option_field_names() -> set[str]:
    """Return the names of every configurable option field."""
    return {f.name for options_class in CONFIGURABLE_OPTIONS for f in fields(options_class) if f.init}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.mdunwrap] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.mdunwrap], or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    tool = data.get("tool", {})
    if not isinstance(tool, dict) or PYPROJECT_SECTION not in tool:
        return {}

    config = tool[PYPROJECT_SECTION]
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for configuration files in priority order:
    ``.mdunwrap.toml``, ``.mdunwrap.yaml``, ``.mdunwrap.yml``,
    ``.mdunwrap.json``, then ``pyproject.toml`` with a [tool.mdunwrap]
    section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                # Unreadable pyproject.toml, keep searching upwards
                logger.debug("Skipping %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover configuration file in standard locations.

    The parent directories of ``start_dir`` (default: the working directory)
    are searched first, then the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from TOML, YAML, JSON or pyproject.toml.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    Examples
    --------
    >>> config = load_config_file(".mdunwrap.toml")
    >>> print(config.get("bullet_symbol"))
    *

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json")

    logger.debug("Loaded configuration from %s", config_path)
    return normalize_config_keys(config)


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def normalize_config_keys(config: Mapping[str, Any]) -> Dict[str, Any]:
    """Normalize keys to option field names and drop unknown ones.

    Keys may be written in kebab-case (``bullet-symbol``) as on the command
    line. Unknown keys are logged and ignored.

    Parameters
    ----------
    config : Mapping[str, Any]
        Raw configuration mapping

    Returns
    -------
    dict
        Mapping keyed by option field name

    """
    known = get_option_field_names()
    result: Dict[str, Any] = {}
    for key, value in config.items():
        name = str(key).replace("-", "_")
        if name in known:
            result[name] = value
        else:
            logger.warning("Ignoring unknown configuration key: %s", key)
    return result


def load_env_options(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect option values from ``MDUNWRAP_<OPTION>`` environment variables.

    List-valued options (``plugins``) are given as comma-separated names.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    dict
        Option values keyed by field name

    Examples
    --------
    >>> load_env_options({"MDUNWRAP_BULLET_SYMBOL": "*"})
    {'bullet_symbol': '*'}

    """
    if environ is None:
        environ = os.environ

    result: Dict[str, Any] = {}
    for name in sorted(get_option_field_names()):
        env_key = f"{ENV_PREFIX}{name.upper()}"
        value = environ.get(env_key)
        if value is None:
            continue
        if name == "plugins":
            result[name] = [item.strip() for item in value.split(",") if item.strip()]
        else:
            result[name] = value
        logger.debug("Using %s from environment", env_key)
    return result


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> merge_configs({"bullet_symbol": "*", "plugins": ["table"]}, {"bullet_symbol": "+"})
    {'bullet_symbol': '+', 'plugins': ['table']}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MDUNWRAP_CONFIG)
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path from --config flag
    env_var_path : str, optional
        Config file path from MDUNWRAP_CONFIG environment variable

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}
