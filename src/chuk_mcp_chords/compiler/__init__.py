"""
Compiler - voiced progressions to MIDI.
"""

from chuk_mcp_chords.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    progression_to_midi,
    velocity_float_to_int,
    voicings_to_events,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "events_to_midi",
    "progression_to_midi",
    "velocity_float_to_int",
    "voicings_to_events",
]
