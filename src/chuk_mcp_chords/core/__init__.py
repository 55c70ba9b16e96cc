"""
Core music primitives.

These are the invariants everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- ScaleDegree: Position in a scale (1-7) with alteration
- KeyMode / Key: Tonic + mode, resolves degrees to pitches
- ChordQuality: Closed table of interval stacks
- ChordSymbol: Concrete chord with root, quality and optional bass
"""

from chuk_mcp_chords.core.chord import ChordQuality, ChordSymbol, QualityFamily
from chuk_mcp_chords.core.pitch import (
    PitchClass,
    midi_to_frequency,
    midi_to_note_name,
    note_name_to_midi,
)
from chuk_mcp_chords.core.scale import Key, KeyMode, ScaleDegree

__all__ = [
    # Pitch
    "PitchClass",
    "midi_to_frequency",
    "midi_to_note_name",
    "note_name_to_midi",
    # Scale
    "ScaleDegree",
    "KeyMode",
    "Key",
    # Chord
    "QualityFamily",
    "ChordQuality",
    "ChordSymbol",
]
