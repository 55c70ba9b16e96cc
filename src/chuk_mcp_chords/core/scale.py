"""
Scale primitives - ScaleDegree, KeyMode, Key.

A key is a tonic plus a mode. Scale degrees are relative positions (1-7)
within the mode's seven-step scale, optionally altered by accidentals.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .pitch import PitchClass


@dataclass(frozen=True)
class ScaleDegree:
    """
    A scale degree with optional alteration.

    Degree is 1-7 (tonic to leading tone).
    Alteration is semitones: -1 = flat, +1 = sharp, 0 = natural.

    Examples:
        ScaleDegree(1) = tonic
        ScaleDegree(5) = dominant
        ScaleDegree(7, -1) = flat 7
    """

    degree: int  # 1-7
    alteration: int = 0  # -1 = flat, +1 = sharp

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= 7:
            raise ValueError(f"Degree must be 1-7, got {self.degree}")

    def __str__(self) -> str:
        if self.alteration > 0:
            return "#" * self.alteration + str(self.degree)
        return "b" * -self.alteration + str(self.degree)


# Cumulative semitones from the tonic for each scale step
_MODE_STEPS: dict[str, tuple[int, ...]] = {
    "major": (0, 2, 4, 5, 7, 9, 11),  # W W H W W W H
    "minor": (0, 2, 3, 5, 7, 8, 10),  # natural minor: W H W W H W W
}

_MODE_ALIASES: dict[str, str] = {
    "maj": "major",
    "ionian": "major",
    "min": "minor",
    "natural_minor": "minor",
    "aeolian": "minor",
}

# Relative-major tonics whose signatures use flats; C spells chromatic tones flat
_FLAT_MAJOR_TONICS = frozenset(
    {
        PitchClass.C,
        PitchClass.F,
        PitchClass.As,  # Bb
        PitchClass.Ds,  # Eb
        PitchClass.Gs,  # Ab
        PitchClass.Cs,  # Db
        PitchClass.Fs,  # Gb
    }
)


class KeyMode(str, Enum):
    """Key modes supported for roman-numeral resolution."""

    MAJOR = "major"
    MINOR = "minor"

    @property
    def steps(self) -> tuple[int, ...]:
        """Semitones from the tonic to each of the seven scale steps."""
        return _MODE_STEPS[self.value]


@dataclass(frozen=True)
class Key:
    """
    A key is a tonic pitch class plus a mode.

    This is the context for resolving roman numerals to concrete chords,
    and the reference point when labelling a chord with its degree.

    Examples:
        Key(PitchClass.C, KeyMode.MAJOR) = C major
        Key(PitchClass.D, KeyMode.MINOR) = D minor
    """

    tonic: PitchClass
    mode: KeyMode = KeyMode.MAJOR

    def degree_to_pitch(self, degree: ScaleDegree) -> PitchClass:
        """Resolve a scale degree (with alteration) to a pitch class."""
        semitones = self.mode.steps[degree.degree - 1] + degree.alteration
        return self.tonic.transpose(semitones)

    def get_pitches(self) -> list[PitchClass]:
        """Get the seven pitch classes of this key."""
        return [self.tonic.transpose(step) for step in self.mode.steps]

    @property
    def prefers_flats(self) -> bool:
        """Whether chromatic tones in this key are spelled with flats."""
        relative_major = self.tonic if self.mode == KeyMode.MAJOR else self.tonic.transpose(3)
        return relative_major in _FLAT_MAJOR_TONICS

    def spell(self, pitch: PitchClass) -> str:
        """Spell a pitch class the way this key would."""
        return pitch.spell(prefer_flats=self.prefers_flats)

    def __str__(self) -> str:
        return f"{self.tonic.spell(prefer_flats=True)} {self.mode.value}"

    def __repr__(self) -> str:
        return f"Key({self.tonic!r}, {self.mode!r})"

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'Db minor' or 'A'.

        A bare tonic means major.

        Raises:
            ValueError: if the tonic or mode is not recognized
        """
        tonic_str, _, mode_str = name.strip().replace(" ", "_").partition("_")
        if not tonic_str:
            raise ValueError(f"Invalid key format: {name}. Expected 'tonic_mode' like 'C_major'")

        tonic = PitchClass.parse(tonic_str)
        mode_str = mode_str.strip("_").lower() or "major"
        mode_str = _MODE_ALIASES.get(mode_str, mode_str)

        try:
            mode = KeyMode(mode_str)
        except ValueError:
            raise ValueError(f"Unknown key mode: {mode_str}") from None

        return cls(tonic, mode)
