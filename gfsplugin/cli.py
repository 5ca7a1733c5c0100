"""Command line entry point for the GlusterFS volume plugin."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from gfsplugin.driver import GlusterDriver
from gfsplugin.errors import PluginError
from gfsplugin.server import SOCKET_DIR, start_unix_socket


def parse_servers(value: str) -> list[str]:
    """Split a comma separated server list, trimming whitespace around each entry."""
    return [server.strip() for server in value.split(",")]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GlusterFS volume plugin")
    parser.add_argument(
        "--servers",
        "-servers",
        default="",
        help="Comma separated list of GlusterFS servers",
    )
    parser.add_argument(
        "--root",
        "-root",
        default="/mnt/glusterfs",
        help="Mount root of volume plugin",
    )
    parser.add_argument(
        "--socket-dir",
        default=SOCKET_DIR,
        help="Directory in which the plugin socket is created",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and serve the plugin socket."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    if not args.servers:
        raise SystemExit("servers parameter is required")

    driver = GlusterDriver(parse_servers(args.servers))
    try:
        start_unix_socket(driver, args.root, args.socket_dir)
    except (PluginError, OSError) as err:
        raise SystemExit(str(err)) from err


if __name__ == "__main__":
    main()