"""
Chord primitives - QualityFamily, ChordQuality, ChordSymbol.

Chord qualities are a closed enumeration. Each member owns its interval
stack (semitones from the root) and its family, so nothing downstream has
to guess a chord's content from substrings of its name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .pitch import PitchClass


class QualityFamily(str, Enum):
    """Broad triad family, used for casing roman numerals."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    HALF_DIMINISHED = "half-diminished"
    AUGMENTED = "augmented"
    SUSPENDED = "suspended"


class ChordQuality(str, Enum):
    """
    Chord quality plus extension. The value is the canonical suffix.

    Examples:
        ChordQuality.MAJOR_7.value == "maj7"
        ChordQuality.MAJOR_7.intervals == (0, 4, 7, 11)
    """

    MAJOR = ""
    MINOR = "m"
    DIMINISHED = "dim"
    AUGMENTED = "aug"
    SUS2 = "sus2"
    SUS4 = "sus4"
    SIX = "6"
    MINOR_6 = "m6"
    SIX_NINE = "69"
    DOMINANT_7 = "7"
    MAJOR_7 = "maj7"
    MINOR_7 = "m7"
    MINOR_MAJOR_7 = "mmaj7"
    HALF_DIMINISHED_7 = "m7b5"
    DIMINISHED_7 = "dim7"
    AUGMENTED_7 = "7#5"
    AUGMENTED_MAJOR_7 = "maj7#5"
    DOMINANT_7_FLAT_5 = "7b5"
    SEVEN_SUS4 = "7sus4"
    ADD9 = "add9"
    MINOR_ADD9 = "madd9"
    NINE = "9"
    MAJOR_9 = "maj9"
    MINOR_9 = "m9"
    DOMINANT_7_FLAT_9 = "7b9"
    DOMINANT_7_SHARP_9 = "7#9"
    DOMINANT_7_SHARP_11 = "7#11"
    DOMINANT_7_FLAT_13 = "7b13"
    ELEVEN = "11"
    MINOR_11 = "m11"
    THIRTEEN = "13"

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitones from the root, ascending."""
        return _INTERVALS[self]

    @property
    def family(self) -> QualityFamily:
        """Triad family of this quality."""
        return _FAMILIES[self]

    @property
    def suffix(self) -> str:
        """Canonical written suffix."""
        return self.value

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """All pitch classes of this quality built on a root, in interval order."""
        return [root.transpose(semitones) for semitones in self.intervals]

    @classmethod
    def from_suffix(cls, suffix: str) -> ChordQuality | None:
        """
        Look up a written suffix ('maj7', 'M7', 'ø7', '-7', ...).

        Case-sensitive: 'M7' is a major seventh, 'm7' a minor seventh.
        Returns None for unknown suffixes.
        """
        return _SUFFIX_ALIASES.get(suffix.strip())


_M = QualityFamily.MAJOR
_MIN = QualityFamily.MINOR
_DIM = QualityFamily.DIMINISHED
_HDIM = QualityFamily.HALF_DIMINISHED
_AUG = QualityFamily.AUGMENTED
_SUS = QualityFamily.SUSPENDED

_TABLE: dict[ChordQuality, tuple[tuple[int, ...], QualityFamily]] = {
    ChordQuality.MAJOR: ((0, 4, 7), _M),
    ChordQuality.MINOR: ((0, 3, 7), _MIN),
    ChordQuality.DIMINISHED: ((0, 3, 6), _DIM),
    ChordQuality.AUGMENTED: ((0, 4, 8), _AUG),
    ChordQuality.SUS2: ((0, 2, 7), _SUS),
    ChordQuality.SUS4: ((0, 5, 7), _SUS),
    ChordQuality.SIX: ((0, 4, 7, 9), _M),
    ChordQuality.MINOR_6: ((0, 3, 7, 9), _MIN),
    ChordQuality.SIX_NINE: ((0, 2, 4, 7, 9), _M),
    ChordQuality.DOMINANT_7: ((0, 4, 7, 10), _M),
    ChordQuality.MAJOR_7: ((0, 4, 7, 11), _M),
    ChordQuality.MINOR_7: ((0, 3, 7, 10), _MIN),
    ChordQuality.MINOR_MAJOR_7: ((0, 3, 7, 11), _MIN),
    ChordQuality.HALF_DIMINISHED_7: ((0, 3, 6, 10), _HDIM),
    ChordQuality.DIMINISHED_7: ((0, 3, 6, 9), _DIM),
    ChordQuality.AUGMENTED_7: ((0, 4, 8, 10), _AUG),
    ChordQuality.AUGMENTED_MAJOR_7: ((0, 4, 8, 11), _AUG),
    ChordQuality.DOMINANT_7_FLAT_5: ((0, 4, 6, 10), _M),
    ChordQuality.SEVEN_SUS4: ((0, 5, 7, 10), _SUS),
    ChordQuality.ADD9: ((0, 2, 4, 7), _M),
    ChordQuality.MINOR_ADD9: ((0, 2, 3, 7), _MIN),
    ChordQuality.NINE: ((0, 2, 4, 7, 10), _M),
    ChordQuality.MAJOR_9: ((0, 2, 4, 7, 11), _M),
    ChordQuality.MINOR_9: ((0, 2, 3, 7, 10), _MIN),
    ChordQuality.DOMINANT_7_FLAT_9: ((0, 1, 4, 7, 10), _M),
    # Spelled with both thirds; the 3 reads as a sharp nine
    ChordQuality.DOMINANT_7_SHARP_9: ((0, 3, 4, 7, 10), _M),
    ChordQuality.DOMINANT_7_SHARP_11: ((0, 4, 6, 7, 10), _M),
    ChordQuality.DOMINANT_7_FLAT_13: ((0, 4, 7, 8, 10), _M),
    ChordQuality.ELEVEN: ((0, 2, 5, 7, 10), _SUS),
    ChordQuality.MINOR_11: ((0, 2, 3, 5, 7, 10), _MIN),
    ChordQuality.THIRTEEN: ((0, 2, 4, 7, 9, 10), _M),
}

_INTERVALS: dict[ChordQuality, tuple[int, ...]] = {q: v[0] for q, v in _TABLE.items()}
_FAMILIES: dict[ChordQuality, QualityFamily] = {q: v[1] for q, v in _TABLE.items()}

# Written suffixes beyond the canonical ones
_EXTRA_ALIASES: dict[str, ChordQuality] = {
    "M": ChordQuality.MAJOR,
    "maj": ChordQuality.MAJOR,
    "major": ChordQuality.MAJOR,
    "min": ChordQuality.MINOR,
    "mi": ChordQuality.MINOR,
    "-": ChordQuality.MINOR,
    "o": ChordQuality.DIMINISHED,
    "°": ChordQuality.DIMINISHED,
    "+": ChordQuality.AUGMENTED,
    "+5": ChordQuality.AUGMENTED,
    "#5": ChordQuality.AUGMENTED,
    "sus": ChordQuality.SUS4,
    "M6": ChordQuality.SIX,
    "min6": ChordQuality.MINOR_6,
    "-6": ChordQuality.MINOR_6,
    "6add9": ChordQuality.SIX_NINE,
    "dom7": ChordQuality.DOMINANT_7,
    "M7": ChordQuality.MAJOR_7,
    "Maj7": ChordQuality.MAJOR_7,
    "ma7": ChordQuality.MAJOR_7,
    "j7": ChordQuality.MAJOR_7,
    "min7": ChordQuality.MINOR_7,
    "mi7": ChordQuality.MINOR_7,
    "-7": ChordQuality.MINOR_7,
    "mM7": ChordQuality.MINOR_MAJOR_7,
    "mMaj7": ChordQuality.MINOR_MAJOR_7,
    "minmaj7": ChordQuality.MINOR_MAJOR_7,
    "-maj7": ChordQuality.MINOR_MAJOR_7,
    "ø": ChordQuality.HALF_DIMINISHED_7,
    "ø7": ChordQuality.HALF_DIMINISHED_7,
    "Ø": ChordQuality.HALF_DIMINISHED_7,
    "Ø7": ChordQuality.HALF_DIMINISHED_7,
    "min7b5": ChordQuality.HALF_DIMINISHED_7,
    "-7b5": ChordQuality.HALF_DIMINISHED_7,
    "m7-5": ChordQuality.HALF_DIMINISHED_7,
    "o7": ChordQuality.DIMINISHED_7,
    "°7": ChordQuality.DIMINISHED_7,
    "aug7": ChordQuality.AUGMENTED_7,
    "+7": ChordQuality.AUGMENTED_7,
    "7+5": ChordQuality.AUGMENTED_7,
    "7+": ChordQuality.AUGMENTED_7,
    "+maj7": ChordQuality.AUGMENTED_MAJOR_7,
    "augmaj7": ChordQuality.AUGMENTED_MAJOR_7,
    "maj7+5": ChordQuality.AUGMENTED_MAJOR_7,
    "7-5": ChordQuality.DOMINANT_7_FLAT_5,
    "7sus": ChordQuality.SEVEN_SUS4,
    "add2": ChordQuality.ADD9,
    "madd2": ChordQuality.MINOR_ADD9,
    "M9": ChordQuality.MAJOR_9,
    "min9": ChordQuality.MINOR_9,
    "-9": ChordQuality.MINOR_9,
    "7-9": ChordQuality.DOMINANT_7_FLAT_9,
    "7+9": ChordQuality.DOMINANT_7_SHARP_9,
    "7+11": ChordQuality.DOMINANT_7_SHARP_11,
    "7-13": ChordQuality.DOMINANT_7_FLAT_13,
    "min11": ChordQuality.MINOR_11,
    "-11": ChordQuality.MINOR_11,
}

_SUFFIX_ALIASES: dict[str, ChordQuality] = {q.value: q for q in ChordQuality}
_SUFFIX_ALIASES.update(_EXTRA_ALIASES)

_SYMBOL_RE = re.compile(r"^(?P<root>[A-G](?:b{1,2}|#{1,2})?)(?P<suffix>.*)$")


@dataclass(frozen=True)
class ChordSymbol:
    """
    A concrete chord: root, quality and optional slash bass.

    Equality is harmonic - root, quality and bass pitch classes.
    The spelling fields are kept for display only.
    """

    root: PitchClass
    quality: ChordQuality = ChordQuality.MAJOR
    bass: PitchClass | None = None
    root_name: str = field(default="", compare=False)
    suffix: str | None = field(default=None, compare=False)
    bass_name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.root_name:
            object.__setattr__(self, "root_name", self.root.spell(prefer_flats=True))
        if self.suffix is None:
            object.__setattr__(self, "suffix", self.quality.value)
        if self.bass is None:
            object.__setattr__(self, "bass_name", None)
        elif not self.bass_name:
            object.__setattr__(self, "bass_name", self.bass.spell(prefer_flats=True))

    @property
    def symbol(self) -> str:
        """Root plus suffix, without the slash bass."""
        return f"{self.root_name}{self.suffix}"

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitones from the root for each chord tone."""
        return self.quality.intervals

    def pitch_classes(self) -> list[PitchClass]:
        """Chord tones in interval order (bass not included)."""
        return self.quality.get_pitches(self.root)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        prefer_flats = "#" not in self.root_name
        return {
            "symbol": str(self),
            "root": self.root_name,
            "quality": self.quality.name.lower(),
            "suffix": self.suffix,
            "bass": self.bass_name,
            "notes": [pc.spell(prefer_flats) for pc in self.pitch_classes()],
        }

    def __str__(self) -> str:
        if self.bass_name:
            return f"{self.symbol}/{self.bass_name}"
        return self.symbol

    @classmethod
    def parse(cls, text: str) -> ChordSymbol:
        """
        Parse an ASCII chord symbol like 'Fmaj7', 'Bbm7b5' or 'Ab/C'.

        Unicode notation must be normalized first (see parsing.normalize).

        Raises:
            ValueError: if the root, suffix or bass cannot be resolved
        """
        symbol, _, bass_text = text.strip().partition("/")

        match = _SYMBOL_RE.match(symbol)
        if not match:
            raise ValueError(f"Unknown chord symbol: {text}")

        suffix = match.group("suffix")
        quality = ChordQuality.from_suffix(suffix)
        if quality is None:
            raise ValueError(f"Unknown chord quality: {suffix}")

        root_name = match.group("root")
        bass = None
        bass_name = None
        if bass_text:
            bass_name = bass_text.strip()
            if not PitchClass.is_spelling(bass_name):
                raise ValueError(f"Unknown bass note: {bass_text}")
            bass = PitchClass.parse(bass_name)

        return cls(
            root=PitchClass.parse(root_name),
            quality=quality,
            bass=bass,
            root_name=root_name,
            suffix=suffix,
            bass_name=bass_name,
        )
