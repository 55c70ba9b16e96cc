"""
Constants and enums for the chord engine.

No magic strings - use enums and module constants for constrained values.
"""

from enum import Enum
from typing import Literal


class InputKind(str, Enum):
    """How a line of input text is interpreted."""

    CHORD = "chord"  # Chord symbols: Fmaj7 E7 Am7
    ROMAN = "roman"  # Degrees relative to a key: ii V7 Imaj7


class ParseStatus(str, Enum):
    """Classification of a single parsed token."""

    OK = "ok"
    WARN = "warn"  # Chord usable, secondary attribute dropped
    ERROR = "error"  # Token could not be resolved
    REST = "rest"  # Intentional silence


# Key tonics offered to users - one spelling per pitch class, flats preferred
TONICS: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

KeyModeName = Literal["major", "minor"]

# Rest spellings: a bare hyphen plus the rest word, optionally parenthesized
REST_WORD = "休"
REST_HYPHEN = "-"

# Token separators. Chord mode additionally splits on dash punctuation and
# on a hyphen before a root; roman mode keeps hyphens for shorthand like 2-5-1.
COMMON_SEPARATORS = r"\s,|→⇒"
DASH_SEPARATORS = "‐‑‒–—―"

# Expansion of the ii-V-I shorthand
TWO_FIVE_ONE: tuple[str, ...] = ("ii", "V7", "Imaj7")

# Voicing defaults (MIDI numbers, C4 = 60)
DEFAULT_VOICE_COUNT = 4
DEFAULT_RANGE_LOW = 36  # C2
DEFAULT_RANGE_HIGH = 84  # C6
DEFAULT_ANCHOR_WEIGHT = 0.35
DEFAULT_LEAP_PENALTY_WEIGHT = 0.7
DEFAULT_LEAP_THRESHOLD = 7
DEFAULT_CENTER_OCTAVE = 4

# Pads and playback
MAX_PADS = 9
DEFAULT_BPM = 90
MIN_BPM = 40
MAX_BPM = 240
DEFAULT_BEATS_PER_CHORD = 4
MIN_BEATS_PER_CHORD = 1
MAX_BEATS_PER_CHORD = 16
MIN_ROOT_OCTAVE = 1
MAX_ROOT_OCTAVE = 6

# Server directory overrides (set by server.py, read by async_server.py)
VOICINGS_DIR_ENV = "CHUK_CHORDS_VOICINGS_DIR"
OUTPUT_DIR_ENV = "CHUK_CHORDS_OUTPUT_DIR"


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_CHORD = "Unrecognized chord symbol: '{symbol}'."
    INVALID_BASS = "Invalid bass note '{bass}'; playing '{symbol}' without it."
    UNKNOWN_NUMERAL = "Not a roman numeral: '{token}'."
    UNKNOWN_EXTENSION = "Ignored unrecognized extension '{extension}' on '{token}'."
    INVALID_KEY = "Invalid key: '{key}'. Expected format like 'C_major' or 'D_minor'."
    INVALID_MODE = "Invalid input mode: '{mode}'. Expected 'chord' or 'roman'."
    PRESET_NOT_FOUND = "Voicing preset '{name}' not found."
    NOTHING_TO_PLAY = "No playable chords in input."


class SuccessMessages:
    """Standardized success messages."""

    MIDI_EXPORTED = "Exported {count} chords to {path}."
