"""
Voicing tools - MCP tools for voicing progressions and browsing presets.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import DEFAULT_CENTER_OCTAVE, ErrorMessages
from chuk_mcp_chords.models.voicing import VoicingOptions
from chuk_mcp_chords.pipeline import render_progression
from chuk_mcp_chords.voicing import DEFAULT_PRESET, PresetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_options(
    loader: PresetLoader,
    preset: str | None,
    voice_count: int | None = None,
) -> VoicingOptions:
    """
    Voicing options for a preset, with an optional voice-count override.

    Raises:
        ValueError: If the preset does not exist or the override is out of range
    """
    options = loader.get_options(preset)
    if options is None:
        raise ValueError(ErrorMessages.PRESET_NOT_FOUND.format(name=preset))
    if voice_count is not None:
        options = VoicingOptions.model_validate({**options.model_dump(), "voice_count": voice_count})
    return options


def register_voicing_tools(mcp: ChukMCPServer, preset_loader: PresetLoader) -> dict[str, Any]:
    """
    Register voicing tools with the MCP server.

    Args:
        mcp: The MCP server instance
        preset_loader: The voicing preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_voice(
        text: str,
        mode: str = "chord",
        from_key: str = "C_major",
        to_key: str | None = None,
        center_octave: int = DEFAULT_CENTER_OCTAVE,
        preset: str = DEFAULT_PRESET,
        voice_count: int | None = None,
    ) -> str:
        """
        Voice a progression with smooth voice leading.

        Each chord is placed near the center register and as close as
        possible to the chord before it.

        Args:
            text: Chord symbols or roman numerals
            mode: 'chord' or 'roman'
            from_key: Key the input is written in
            to_key: Optional key to transpose to before voicing
            center_octave: Octave whose C anchors the register (4 = middle C)
            preset: Voicing preset name (see chords_list_presets)
            voice_count: Optional override of the preset's voice count

        Returns:
            JSON string with one voicing per playable chord

        Example:
            chords_voice(text="Dm7 G7 Cmaj7", preset="piano-rootless")
        """
        try:
            options = resolve_options(preset_loader, preset, voice_count)
            render = render_progression(
                text,
                mode,
                from_key,
                to_key,
                center_octave=center_octave,
                options=options,
            )

            return json.dumps(
                {
                    "status": "success",
                    "preset": preset,
                    "shift": render.shift,
                    "chords": [rendered.to_dict() for rendered in render.chords],
                    "items": [item.to_dict() for item in render.items],
                    "has_errors": render.has_errors,
                }
            )
        except Exception as e:
            logger.exception("Failed to voice progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_voice"] = chords_voice

    @mcp.tool  # type: ignore[arg-type]
    async def chords_list_presets() -> str:
        """
        List available voicing presets.

        Returns:
            JSON string with preset names and descriptions

        Example:
            chords_list_presets()
        """
        try:
            presets = preset_loader.list_presets()

            return json.dumps(
                {
                    "status": "success",
                    "presets": [
                        {
                            "name": p.name,
                            "description": p.description,
                            "voice_count": p.options.voice_count,
                        }
                        for p in presets
                    ],
                    "count": len(presets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list presets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_list_presets"] = chords_list_presets

    @mcp.tool  # type: ignore[arg-type]
    async def chords_describe_preset(name: str) -> str:
        """
        Get the full options of a voicing preset.

        Args:
            name: Preset name

        Returns:
            JSON string with the preset's options

        Example:
            chords_describe_preset(name="pad-wide")
        """
        try:
            preset = preset_loader.get_preset(name)
            if preset is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.PRESET_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "preset": preset.model_dump()})
        except Exception as e:
            logger.exception("Failed to describe preset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_describe_preset"] = chords_describe_preset

    return tools
