r"""relayinfo -- NIP-11 relay information documents from relay settings.

Derives the public, machine-readable document a Nostr relay serves to
clients before they open a session (identity, supported NIPs, write
limitations and fee schedule) from the relay's private settings.

Layers, with imports flowing strictly downward:

```text
              __main__         CLI: settings file -> JSON document
                 |
               nips            Document models and the builder
                 |
              models           Settings snapshot and constants
                 |
               core            Logging, YAML loading, exceptions
```

Note:
    Top-level imports (``from relayinfo import Settings``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("relayinfo")

__all__ = [
    "ConfigurationError",
    "Fee",
    "Fees",
    "Limitation",
    "Logger",
    "RelayInfo",
    "RelayInfoError",
    "Settings",
    "build_relay_info",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("relayinfo.core", "ConfigurationError"),
    "Logger": ("relayinfo.core", "Logger"),
    "RelayInfoError": ("relayinfo.core", "RelayInfoError"),
    "Settings": ("relayinfo.models", "Settings"),
    "Fee": ("relayinfo.nips.nip11", "Fee"),
    "Fees": ("relayinfo.nips.nip11", "Fees"),
    "Limitation": ("relayinfo.nips.nip11", "Limitation"),
    "RelayInfo": ("relayinfo.nips.nip11", "RelayInfo"),
    "build_relay_info": ("relayinfo.nips.nip11", "build_relay_info"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'relayinfo' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
