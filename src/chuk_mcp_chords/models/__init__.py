"""
Pydantic models for configuration.

This module provides:
- PitchRange: Inclusive MIDI range
- VoicingOptions: Voicing engine configuration
- VoicingPreset: Named options loaded from YAML
- PlaybackSettings: Tempo and chord length for export
"""

from chuk_mcp_chords.models.voicing import (
    PitchRange,
    PlaybackSettings,
    VoicingOptions,
    VoicingPreset,
)

__all__ = [
    "PitchRange",
    "PlaybackSettings",
    "VoicingOptions",
    "VoicingPreset",
]
