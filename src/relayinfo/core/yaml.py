"""YAML configuration loading for relayinfo.

Provides safe YAML file loading using ``yaml.safe_load`` to prevent
arbitrary code execution from untrusted YAML content. Used by
[Settings.from_yaml()][relayinfo.models.settings.Settings.from_yaml]
to load relay settings files.

Examples:
    ```python
    from relayinfo.core.yaml import load_yaml

    config = load_yaml("config/relay.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a nested dictionary. Returns an empty dict
        if the file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.
        TypeError: If the top-level YAML value is not a mapping.

    Warning:
        This function does not validate the structure of the returned
        dictionary. Callers pass the result to
        [Settings][relayinfo.models.settings.Settings] for schema validation.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise TypeError(f"Config file must contain a mapping: {config_path}")
    return data
