"""
Parsing tools - MCP tools for reading and transposing progressions.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import ParseStatus
from chuk_mcp_chords.pipeline import parse_input, parse_key, render_progression

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_parsing_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register parsing and transposition tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_parse(text: str, mode: str = "chord", key: str = "C_major") -> str:
        """
        Parse a progression into per-token results.

        Every token gets a status: ok, warn (chord kept, something dropped),
        error (unrecognized) or rest. Roman numerals are resolved in the key.

        Args:
            text: Chord symbols ('Fmaj7 E7 Am7') or roman numerals ('ii V7 Imaj7', '251')
            mode: 'chord' or 'roman'
            key: Key for roman numerals, e.g. 'C_major', 'A_minor'

        Returns:
            JSON string with parsed items and counts

        Example:
            chords_parse(text="ii V7 Imaj7", mode="roman", key="Bb_major")
        """
        try:
            items = parse_input(text, mode, key)
            counts = {status.value: 0 for status in ParseStatus}
            for item in items:
                counts[item.status.value] += 1

            return json.dumps(
                {
                    "status": "success",
                    "items": [item.to_dict() for item in items],
                    "counts": counts,
                    "playable": [str(item.chord) for item in items if item.playable],
                }
            )
        except Exception as e:
            logger.exception("Failed to parse progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_parse"] = chords_parse

    @mcp.tool  # type: ignore[arg-type]
    async def chords_transpose(
        text: str,
        mode: str = "chord",
        from_key: str = "C_major",
        to_key: str = "C_major",
    ) -> str:
        """
        Transpose a progression from one key to another.

        The shift is the shorter way around the octave (at most a tritone).
        Note names follow the target key's spelling.

        Args:
            text: Chord symbols or roman numerals
            mode: 'chord' or 'roman'
            from_key: Key the input is written in
            to_key: Key to move to

        Returns:
            JSON string with the shift and each chord before and after

        Example:
            chords_transpose(text="Dm7 G7 Cmaj7", from_key="C_major", to_key="Eb_major")
        """
        try:
            render = render_progression(text, mode, from_key, parse_key(to_key))

            return json.dumps(
                {
                    "status": "success",
                    "from_key": str(render.from_key),
                    "to_key": str(render.to_key),
                    "shift": render.shift,
                    "chords": [
                        {
                            "raw": rendered.item.raw,
                            "degree": rendered.degree,
                            "original": str(rendered.original),
                            "transposed": str(rendered.chord),
                        }
                        for rendered in render.chords
                    ],
                    "has_errors": render.has_errors,
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_transpose"] = chords_transpose

    return tools
