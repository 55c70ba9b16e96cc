"""
Key transform - move chords between keys and label them with degrees.

semitone_distance() picks the shorter way around the octave circle, so a
transposition never moves more than a tritone. degree_for_chord() is the
display-side inverse of roman resolution: a readable label, not analysis.
"""

from __future__ import annotations

import re
from dataclasses import replace

from chuk_mcp_chords.core.chord import ChordSymbol, QualityFamily
from chuk_mcp_chords.core.pitch import PitchClass
from chuk_mcp_chords.core.scale import Key
from chuk_mcp_chords.parsing.chords import parse_chord_symbol

# Semitones above the tonic -> degree numeral. The tritone names both spellings.
_DEGREE_LABELS: tuple[str, ...] = (
    "I",
    "bII",
    "II",
    "bIII",
    "III",
    "IV",
    "#IV/bV",
    "V",
    "bVI",
    "VI",
    "bVII",
    "VII",
)

UNKNOWN_DEGREE = "?"

TonicLike = PitchClass | Key | str

# A bare 7 not glued to a letter or another digit (G7, 7sus4, 7b9)
_DOMINANT_SEVEN_RE = re.compile(r"(^|[^a-z])7(?!\d)")


def _as_pitch_class(value: TonicLike) -> PitchClass | None:
    if isinstance(value, Key):
        return value.tonic
    if isinstance(value, PitchClass):
        return value
    try:
        return PitchClass.parse(value)
    except ValueError:
        return None


def _as_chord(chord: ChordSymbol | str) -> ChordSymbol | None:
    if isinstance(chord, ChordSymbol):
        return chord
    return parse_chord_symbol(chord)


def semitone_distance(from_tonic: TonicLike, to_tonic: TonicLike) -> int:
    """
    Signed shortest distance between two tonics, in [-6, 6].

    Antisymmetric, the tritone included: C -> F# is +6 and F# -> C is -6.
    Unparseable tonics give 0 (no transposition).
    """
    start = _as_pitch_class(from_tonic)
    end = _as_pitch_class(to_tonic)
    if start is None or end is None:
        return 0

    diff = end.value - start.value
    if diff > 6:
        diff -= 12
    elif diff < -6:
        diff += 12
    return diff


def transpose_chord(
    chord: ChordSymbol | str,
    semitones: int,
    key: Key | None = None,
) -> ChordSymbol | None:
    """
    Shift a chord's root and bass by a number of semitones.

    Quality and written suffix are unchanged. New note names follow the
    target key's spelling when one is given, flats otherwise.

    Returns:
        The transposed chord, or None if a string chord cannot be parsed
    """
    parsed = _as_chord(chord)
    if parsed is None:
        return None

    def spell(pitch: PitchClass) -> str:
        return key.spell(pitch) if key else pitch.spell(prefer_flats=True)

    root = parsed.root.transpose(semitones)
    bass = parsed.bass.transpose(semitones) if parsed.bass is not None else None
    return replace(
        parsed,
        root=root,
        root_name=spell(root),
        bass=bass,
        bass_name=spell(bass) if bass is not None else None,
    )


def degree_for_chord(chord: ChordSymbol | str, key: Key) -> str:
    """
    Label a concrete chord with its degree relative to a key.

    Casing follows the chord family (minor lowercase, diminished and
    half-diminished lowercase with a degree mark, augmented with '+'),
    then a short extension token is appended: maj7, ø, m7, 7 or sus -
    first match wins.

    Examples (C major):
        G7     -> 'V7'
        Dm7    -> 'iim7'
        Bbmaj7 -> 'bVIImaj7'
        Bm7b5  -> 'vii°ø'
    """
    parsed = _as_chord(chord)
    if parsed is None:
        return UNKNOWN_DEGREE

    base = _DEGREE_LABELS[key.tonic.interval_to(parsed.root)]

    family = parsed.quality.family
    if family == QualityFamily.MINOR:
        numeral = base.lower()
    elif family in (QualityFamily.DIMINISHED, QualityFamily.HALF_DIMINISHED):
        numeral = base.lower() + "°"
    elif family == QualityFamily.AUGMENTED:
        numeral = base + "+"
    else:
        numeral = base

    return numeral + _extension_token(parsed.quality.value)


def _extension_token(suffix: str) -> str:
    if "maj7" in suffix:
        return "maj7"
    if "m7b5" in suffix:
        return "ø"
    if "m7" in suffix:
        return "m7"
    if _DOMINANT_SEVEN_RE.search(suffix):
        return "7"
    if "sus" in suffix:
        return "sus"
    return ""


def format_symbol(chord: ChordSymbol) -> str:
    """Root + suffix, with '/bass' for slash chords."""
    return str(chord)
