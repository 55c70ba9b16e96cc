"""
Export tools - MCP tools for writing progressions to MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.compiler import progression_to_midi
from chuk_mcp_chords.constants import (
    DEFAULT_BEATS_PER_CHORD,
    DEFAULT_BPM,
    DEFAULT_CENTER_OCTAVE,
    ErrorMessages,
    SuccessMessages,
)
from chuk_mcp_chords.models.voicing import PlaybackSettings
from chuk_mcp_chords.pipeline import render_progression
from chuk_mcp_chords.tools.voicing import resolve_options
from chuk_mcp_chords.voicing import DEFAULT_PRESET, PresetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(
    mcp: ChukMCPServer,
    preset_loader: PresetLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register MIDI export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        preset_loader: The voicing preset loader
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_export_midi(
        text: str,
        mode: str = "chord",
        from_key: str = "C_major",
        to_key: str | None = None,
        center_octave: int = DEFAULT_CENTER_OCTAVE,
        preset: str = DEFAULT_PRESET,
        bpm: int = DEFAULT_BPM,
        beats_per_chord: int = DEFAULT_BEATS_PER_CHORD,
        filename: str = "progression",
    ) -> str:
        """
        Voice a progression and save it as a MIDI file.

        Each chord lasts beats_per_chord beats; tempo and length are
        clamped to their allowed ranges.

        Args:
            text: Chord symbols or roman numerals
            mode: 'chord' or 'roman'
            from_key: Key the input is written in
            to_key: Optional key to transpose to
            center_octave: Octave whose C anchors the register
            preset: Voicing preset name
            bpm: Tempo (40-240)
            beats_per_chord: Length of each chord in beats (1-16)
            filename: Output filename (without .mid extension)

        Returns:
            JSON string with the output path

        Example:
            chords_export_midi(text="251", mode="roman", from_key="F_major", bpm=100)
        """
        try:
            options = resolve_options(preset_loader, preset)
            render = render_progression(
                text,
                mode,
                from_key,
                to_key,
                center_octave=center_octave,
                options=options,
            )
            if not render.chords:
                return json.dumps({"status": "error", "message": ErrorMessages.NOTHING_TO_PLAY})

            settings = PlaybackSettings.clamped(bpm, beats_per_chord)
            midi = progression_to_midi(render, settings)

            output_path = output_dir / f"{Path(filename).stem}.mid"
            output_dir.mkdir(parents=True, exist_ok=True)
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "bpm": settings.bpm,
                    "beats_per_chord": settings.beats_per_chord,
                    "chords": [str(rendered.chord) for rendered in render.chords],
                    "has_errors": render.has_errors,
                    "message": SuccessMessages.MIDI_EXPORTED.format(
                        count=len(render.chords), path=output_path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_export_midi"] = chords_export_midi

    return tools
