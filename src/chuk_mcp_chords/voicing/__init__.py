"""
Voicing - octave placement with voice leading.

This module provides:
- voice_chord: One chord, led from the previous voicing
- voice_progression: Left-to-right fold over a progression
- root_position_notes: Plain root-position stacking
- PresetLoader: Named voicing options from YAML
"""

from chuk_mcp_chords.voicing.engine import (
    ChordTone,
    ToneRole,
    VoicingResult,
    classify_tones,
    close_stack,
    generate_candidates,
    root_position_notes,
    select_tones,
    voice_chord,
    voice_progression,
    voicing_cost,
)
from chuk_mcp_chords.voicing.presets import DEFAULT_PRESET, PresetLoader

__all__ = [
    # Engine
    "ChordTone",
    "ToneRole",
    "VoicingResult",
    "classify_tones",
    "select_tones",
    "close_stack",
    "generate_candidates",
    "voicing_cost",
    "voice_chord",
    "voice_progression",
    "root_position_notes",
    # Presets
    "DEFAULT_PRESET",
    "PresetLoader",
]
