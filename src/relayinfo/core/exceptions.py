"""relayinfo exception hierarchy.

The document builder is a total function and raises nothing; errors only
arise at the edges, while loading and validating relay settings.

Exception hierarchy:

```text
RelayInfoError (base -- never raised directly)
└── ConfigurationError      -- missing file, bad YAML, invalid settings
```

See Also:
    [Settings.from_yaml()][relayinfo.models.settings.Settings.from_yaml]:
        Raises [ConfigurationError][relayinfo.core.exceptions.ConfigurationError]
        when a settings file cannot be loaded or validated.
    [relayinfo.__main__][relayinfo.__main__]: CLI error boundary that
        turns configuration errors into a non-zero exit code.
"""

from __future__ import annotations


class RelayInfoError(Exception):
    """Base exception for all relayinfo errors.

    Never raised directly -- always use a specific subclass.
    """


class ConfigurationError(RelayInfoError):
    """Invalid or missing relay configuration (YAML file, settings values).

    See Also:
        [load_yaml()][relayinfo.core.yaml.load_yaml]: YAML loading function
            whose failures are wrapped in this exception.
    """
