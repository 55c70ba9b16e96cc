#!/usr/bin/env python3
"""
Entry point for the CHUK Chords MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http). Project voicing
presets and MIDI output default to ./voicings and ./output and can be
moved with --voicings-dir and --output-dir.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from chuk_mcp_chords.constants import OUTPUT_DIR_ENV, VOICINGS_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Chords MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--voicings-dir",
        type=Path,
        default=None,
        help="Directory of project voicing presets (default: ./voicings)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for exported MIDI files (default: ./output)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def apply_path_overrides(args: argparse.Namespace) -> None:
    """Publish directory overrides for async_server, which reads them on import."""
    if args.voicings_dir is not None:
        os.environ[VOICINGS_DIR_ENV] = str(args.voicings_dir.resolve())
    if args.output_dir is not None:
        os.environ[OUTPUT_DIR_ENV] = str(args.output_dir.resolve())


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    apply_path_overrides(args)

    # The server module registers tools on import
    from chuk_mcp_chords.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Chords MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Chords MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
