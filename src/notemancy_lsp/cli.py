"""CLI for notemancy-lsp - language server for wiki-linked markdown vaults."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .core.errors import ConfigError
from .runtime import build_runtime

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: Path | None = None) -> None:
    """Send logs to stderr or a file; stdout belongs to the protocol."""
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level.upper())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notemancy-lsp", description="Language server for notemancy vaults"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: $NOTEMANCY_CONF_DIR/config.yaml, "
        "~/.config/notemancy/config.yaml)",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Path to vault directory (overrides config)",
    )
    parser.add_argument(
        "--tcp", action="store_true", help="Serve over TCP instead of stdio"
    )
    parser.add_argument("--host", default="127.0.0.1", help="TCP host")
    parser.add_argument("--port", type=int, default=2087, help="TCP port")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Write logs here instead of stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    # imported late so --help/--version stay fast
    from .server import server

    try:
        runtime = build_runtime(vault_path=args.vault, config_path=args.config)
    except ConfigError as e:
        # keep serving: each vault-backed request reports this error
        logger.error("Configuration error: %s", e)
        server.configure(error=e)
    else:
        server.configure(runtime=runtime)

    if args.tcp:
        server.start_tcp(args.host, args.port)
    else:
        server.start_io()


if __name__ == "__main__":
    main()
