"""CLI entry point: render the NIP-11 document for a relay settings file.

The document is written to stdout as JSON; logs go to stderr.

Examples:
    ```bash
    python -m relayinfo
    python -m relayinfo --config config/relay.yaml --indent 2
    python -m relayinfo --no-version --log-level DEBUG
    ```
"""

import argparse
import logging
import sys
from pathlib import Path

from relayinfo.core.exceptions import ConfigurationError
from relayinfo.core.logger import Logger, StructuredFormatter
from relayinfo.models.settings import Settings
from relayinfo.nips.nip11 import PACKAGE_VERSION, build_relay_info


DEFAULT_CONFIG = Path("config") / "relay.yaml"

logger = Logger("cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="relayinfo",
        description="Render a relay's NIP-11 information document",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help=f"Relay settings path (default: {DEFAULT_CONFIG})",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print the JSON with this indentation",
    )

    parser.add_argument(
        "--no-version",
        action="store_true",
        help="Omit the software version from the document",
    )

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Install a ``StructuredFormatter`` on a root stderr handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def load_settings(path: Path) -> Settings:
    """Load settings from *path*, falling back to defaults if it does not exist."""
    if not path.exists():
        logger.warning("config_not_found", path=str(path))
        return Settings()
    return Settings.from_yaml(path)


def main(argv: list[str] | None = None) -> int:
    """Parse args, build the document and print it. Returns the exit code."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = load_settings(args.config)
    except ConfigurationError as e:
        logger.error("config_invalid", path=str(args.config), error=str(e))
        return 1

    document = build_relay_info(
        settings,
        version=None if args.no_version else PACKAGE_VERSION,
    )
    logger.info(
        "document_built",
        nips=len(document.supported_nips or ()),
        payment_url=document.payment_url,
    )
    sys.stdout.write(document.to_json(indent=args.indent) + "\n")
    return 0


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
