"""
Key transform - transposition and degree labelling.
"""

from chuk_mcp_chords.transform.key import (
    UNKNOWN_DEGREE,
    degree_for_chord,
    format_symbol,
    semitone_distance,
    transpose_chord,
)

__all__ = [
    "UNKNOWN_DEGREE",
    "degree_for_chord",
    "format_symbol",
    "semitone_distance",
    "transpose_chord",
]
