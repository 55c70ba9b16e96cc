"""
MCP tool implementations.

Tools are organized by domain:
- parsing - Parsing and transposition
- voicing - Voicing and preset discovery
- export - MIDI export
"""

from chuk_mcp_chords.tools.export import register_export_tools
from chuk_mcp_chords.tools.parsing import register_parsing_tools
from chuk_mcp_chords.tools.voicing import register_voicing_tools

__all__ = [
    "register_export_tools",
    "register_parsing_tools",
    "register_voicing_tools",
]
