"""Core layer: logging, YAML loading, and the exception hierarchy.

Depends on nothing else inside ``relayinfo``. Consumed by
``relayinfo.models`` (settings loading) and the CLI.

Attributes:
    Logger: Structured logger rendering keyword arguments as key=value pairs.
        See [Logger][relayinfo.core.logger.Logger].
    StructuredFormatter: Root-handler formatter that unifies ``Logger`` and
        plain ``logging`` output.
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][relayinfo.core.yaml.load_yaml].
    RelayInfoError: Base of the exception hierarchy.
    ConfigurationError: Invalid or missing relay settings.
"""

from .exceptions import ConfigurationError, RelayInfoError
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "Logger",
    "RelayInfoError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
