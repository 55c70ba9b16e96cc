#!/usr/bin/env python3
"""
Async Chords MCP Server using chuk-mcp-server

This server provides MCP tools for turning chord progressions into playable
voicings. Input is either chord symbols (Fmaj7 E7 Am7) or roman numerals
relative to a key (ii V7 Imaj7, 251).

The server provides tools for:
- Parsing progressions with per-token diagnostics
- Transposing between keys with degree labels
- Voicing with smooth voice leading, configured by YAML presets
- Exporting voiced progressions to MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.constants import OUTPUT_DIR_ENV, VOICINGS_DIR_ENV
from chuk_mcp_chords.tools import (
    register_export_tools,
    register_parsing_tools,
    register_voicing_tools,
)
from chuk_mcp_chords.voicing import PresetLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Paths - standard project structure unless overridden from the command line
BASE_PATH = Path.cwd()
VOICINGS_DIR = Path(os.environ.get(VOICINGS_DIR_ENV, BASE_PATH / "voicings"))
OUTPUT_DIR = Path(os.environ.get(OUTPUT_DIR_ENV, BASE_PATH / "output"))
PRESETS_LIBRARY_PATH = Path(__file__).parent / "voicing" / "library"

preset_loader = PresetLoader(
    library_path=PRESETS_LIBRARY_PATH,
    project_path=VOICINGS_DIR,
)

# Register all tools
parsing_tools = register_parsing_tools(mcp)
voicing_tools = register_voicing_tools(mcp, preset_loader)
export_tools = register_export_tools(mcp, preset_loader, OUTPUT_DIR)

# Export tool functions for direct access
chords_parse = parsing_tools["chords_parse"]
chords_transpose = parsing_tools["chords_transpose"]

chords_voice = voicing_tools["chords_voice"]
chords_list_presets = voicing_tools["chords_list_presets"]
chords_describe_preset = voicing_tools["chords_describe_preset"]

chords_export_midi = export_tools["chords_export_midi"]

logger.info("CHUK Chords MCP Server initialized")
logger.info(f"  Presets library: {PRESETS_LIBRARY_PATH}")
logger.info(f"  Project presets: {VOICINGS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
