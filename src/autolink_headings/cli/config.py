#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the autolink-headings CLI.

Configuration files hold :class:`~autolink_headings.transforms.AutolinkOptions`
fields as plain data, for example in ``.autolink-headings.toml``::

    behavior = "before"
    test = ["h2", "h3"]

    [group]
    type = "element"
    tagName = "div"
    properties = { className = ["heading-group"] }

or in ``pyproject.toml`` under ``[tool.autolink-headings]``.
"""

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from autolink_headings.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES, PYPROJECT_SECTION
from autolink_headings.exceptions import ConfigurationError, FileError

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.autolink-headings]`` section from pyproject.toml.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        The section, or an empty dict if the file has none

    Raises
    ------
    ConfigurationError
        If the file is not valid TOML or the section is not a table

    """
    data = _load_toml_config(pyproject_path)
    config = data.get("tool", {}).get(PYPROJECT_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked for
    the dedicated config files first, then for a ``pyproject.toml`` that has a
    ``[tool.autolink-headings]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

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
            except ConfigurationError:
                logger.debug("Skipping unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches the working directory and its parents (see
    :func:`find_config_in_parents`), then the user's home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

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
    FileError
        If the file does not exist or cannot be read
    ConfigurationError
        If the file cannot be parsed or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise FileError(f"Configuration file does not exist: {config_path}", file_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    if ext == ".toml":
        return _load_toml_config(config_path)
    if ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    if ext == ".json":
        return _load_json_config(config_path)
    raise ConfigurationError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def _read_error(config_path: Path, error: OSError) -> FileError:
    return FileError(f"Error reading config file {config_path}: {error}", file_path=str(config_path),
                     original_error=error)


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a TOML file."""
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise _read_error(config_path, e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a JSON file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise _read_error(config_path, e) from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from a YAML file; an empty file gives ``{}``."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise _read_error(config_path, e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> merge_configs({"behavior": "wrap", "properties": {"a": 1}}, {"properties": {"b": 2}})
    {'behavior': 'wrap', 'properties': {'a': 1, 'b': 2}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(explicit_path: Optional[str] = None, use_discovery: bool = True) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. ``AUTOLINK_HEADINGS_CONFIG`` environment variable
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Path given on the command line
    use_discovery : bool, default True
        Whether to fall back to the environment variable and discovery

    Returns
    -------
    dict
        Configuration from the first source found, or an empty dict

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if not use_discovery:
        return {}

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        logger.info("Using config file from %s: %s", CONFIG_ENV_VAR, env_path)
        return load_config_file(env_path)

    discovered = discover_config_file()
    if discovered:
        logger.info("Using discovered config file: %s", discovered)
        return load_config_file(discovered)

    return {}
