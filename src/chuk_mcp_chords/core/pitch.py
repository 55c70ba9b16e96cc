"""
Pitch primitives - PitchClass and absolute (MIDI) pitch helpers.

PitchClass represents the 12 chromatic pitches (octave-independent).
Absolute pitch is a plain MIDI number: C4 = 60, A4 = 69.
"""

from __future__ import annotations

import re
from enum import IntEnum

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
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
]

_LETTER_VALUES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

_SPELLING_RE = re.compile(r"^(?P<letter>[A-G])(?P<accidentals>b{1,2}|#{1,2})?$")
_NOTE_NAME_RE = re.compile(r"^(?P<name>[A-G](?:b{1,2}|#{1,2})?)(?P<octave>-?\d+)$")

# Reference pitch for frequency conversion
A4_MIDI = 69
A4_FREQUENCY = 440.0


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled by spell().
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> int:
        """Ascending semitone distance from this pitch class to another (0-11)."""
        return (other.value - self.value) % 12

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a spelling like 'C', 'F#', 'Db', 'Bbb'.

        Up to two accidentals of one kind are accepted. Enum names
        ('Cs', 'Fs') are accepted as well.
        """
        name = name.strip()

        match = _SPELLING_RE.match(name)
        if match:
            value = _LETTER_VALUES[match.group("letter")]
            accidentals = match.group("accidentals") or ""
            value += accidentals.count("#") - accidentals.count("b")
            return cls(value % 12)

        for member in cls:
            if member.name == name:
                return member

        raise ValueError(f"Unknown pitch class: {name}")

    @classmethod
    def is_spelling(cls, name: str) -> bool:
        """Check whether a string is a valid letter + accidental spelling."""
        return _SPELLING_RE.match(name) is not None


def midi_to_note_name(midi_note: int, prefer_flats: bool = False) -> str:
    """MIDI number to scientific pitch name: 60 -> 'C4', 70 -> 'A#4' / 'Bb4'."""
    octave = midi_note // 12 - 1
    return f"{PitchClass.from_midi(midi_note).spell(prefer_flats)}{octave}"


def note_name_to_midi(name: str) -> int:
    """Scientific pitch name to MIDI number: 'C4' -> 60, 'Bb3' -> 58."""
    match = _NOTE_NAME_RE.match(name.strip())
    if not match:
        raise ValueError(f"Invalid note name: {name}")
    spelling = match.group("name")
    octave = int(match.group("octave"))
    # Accidentals may cross the octave boundary (Cb4 = B3, B#3 = C4)
    letter_midi = _LETTER_VALUES[spelling[0]] + (octave + 1) * 12
    return letter_midi + spelling.count("#") - spelling.count("b")


def midi_to_frequency(midi_note: int, a4: float = A4_FREQUENCY) -> float:
    """Equal-tempered frequency in Hz for a MIDI number."""
    return a4 * 2.0 ** ((midi_note - A4_MIDI) / 12)
