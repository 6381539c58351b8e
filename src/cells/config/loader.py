"""
Configuration loading utilities.

Supports environment variable interpolation in string values.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from cells.config.settings import CellsConfig
from cells.utils.logging import configure_logging


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping, got {type(data).__name__}: {path}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(config_path: Path, *, apply_logging: bool = True) -> CellsConfig:
    """
    Load configuration from a YAML file.

    The logging section is applied with configure_logging() unless
    apply_logging is False.

    Example file:
        order_policy: ${CELLS_ORDER_POLICY:verbatim}
        logging:
          level: DEBUG

    Args:
        config_path: Path to the configuration file.
        apply_logging: Whether to configure structlog from the loaded settings.

    Returns:
        Fully validated CellsConfig instance.
    """
    config = CellsConfig.model_validate(load_yaml(Path(config_path)))
    if apply_logging:
        configure_logging(config.logging)
    return config
