"""
Progression pipeline - text in, voiced pads out.

The forward flow is:
    text -> ParsedItems -> playable chords -> transposed chords
         -> degree labels -> voicing fold -> RenderedChords

Everything is recomputed from the inputs on each call; there is no
hidden state between renders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_chords.constants import (
    DEFAULT_CENTER_OCTAVE,
    MAX_PADS,
    REST_WORD,
    ErrorMessages,
    InputKind,
    ParseStatus,
)
from chuk_mcp_chords.core.chord import ChordSymbol
from chuk_mcp_chords.core.scale import Key
from chuk_mcp_chords.models.voicing import VoicingOptions
from chuk_mcp_chords.parsing.chords import parse_chord_tokens
from chuk_mcp_chords.parsing.items import ParsedItem
from chuk_mcp_chords.parsing.roman import parse_roman_tokens
from chuk_mcp_chords.transform.key import degree_for_chord, semitone_distance, transpose_chord
from chuk_mcp_chords.voicing.engine import VoicingResult, voice_progression


@dataclass(frozen=True)
class RenderedChord:
    """One playable chord after transposition and voicing."""

    index: int  # Position among playable chords
    item: ParsedItem
    original: ChordSymbol
    chord: ChordSymbol  # In the target key
    label: str
    degree: str
    voicing: VoicingResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "raw": self.item.raw,
            "label": self.label,
            "degree": self.degree,
            "original": str(self.original),
            "chord": str(self.chord),
            "voicing": self.voicing.to_dict(),
        }


@dataclass(frozen=True)
class ProgressionRender:
    """Result of rendering a line of input."""

    mode: InputKind
    from_key: Key
    to_key: Key
    shift: int
    items: list[ParsedItem] = field(default_factory=list)
    chords: list[RenderedChord] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(item.status == ParseStatus.ERROR for item in self.items)

    @property
    def warnings(self) -> list[ParsedItem]:
        return [item for item in self.items if item.status == ParseStatus.WARN]

    @property
    def voicings(self) -> list[VoicingResult]:
        return [rendered.voicing for rendered in self.chords]

    def pads(self, max_pads: int = MAX_PADS) -> list[RenderedChord]:
        """The first max_pads chords, as laid out on a pad grid."""
        return self.chords[:max_pads]

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "from_key": str(self.from_key),
            "to_key": str(self.to_key),
            "shift": self.shift,
            "has_errors": self.has_errors,
            "items": [item.to_dict() for item in self.items],
            "chords": [rendered.to_dict() for rendered in self.chords],
        }


def parse_mode(mode: InputKind | str) -> InputKind:
    """Input mode from its name; raises ValueError for anything else."""
    if isinstance(mode, InputKind):
        return mode
    try:
        return InputKind(mode.strip().lower())
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_MODE.format(mode=mode)) from None


def parse_key(key: Key | str) -> Key:
    """Key from 'C_major', 'Db minor' or 'A'; raises ValueError with a readable message."""
    if isinstance(key, Key):
        return key
    try:
        return Key.parse(key)
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_KEY.format(key=key)) from None


def parse_input(
    text: str,
    mode: InputKind | str = InputKind.CHORD,
    key: Key | str = "C_major",
    rest_word: str = REST_WORD,
) -> list[ParsedItem]:
    """Parse a line of input in either mode; roman mode resolves against key."""
    kind = parse_mode(mode)
    if kind == InputKind.ROMAN:
        return parse_roman_tokens(text, parse_key(key), rest_word)
    return parse_chord_tokens(text, rest_word)


def _label(item: ParsedItem, chord: ChordSymbol, kind: InputKind, from_key: Key) -> tuple[str, str]:
    """(display label, degree): roman input shows its own degree, chord input its raw token."""
    if kind == InputKind.ROMAN:
        degree = item.degree or item.raw
        return degree, degree
    return item.raw, degree_for_chord(chord, from_key)


def render_progression(
    text: str,
    mode: InputKind | str = InputKind.CHORD,
    from_key: Key | str = "C_major",
    to_key: Key | str | None = None,
    center_octave: int = DEFAULT_CENTER_OCTAVE,
    options: VoicingOptions | None = None,
    rest_word: str = REST_WORD,
) -> ProgressionRender:
    """
    Parse, transpose, label and voice a progression.

    Args:
        text: Chord symbols or roman numerals
        mode: 'chord' or 'roman'
        from_key: Key roman numerals resolve in, and degrees are labeled in
        to_key: Playback key (defaults to from_key, i.e. no shift)
        center_octave: Register anchor for voicing
        options: Voicing options
        rest_word: Word treated as a rest

    Returns:
        ProgressionRender with every parsed item and one RenderedChord per
        playable item, in input order
    """
    kind = parse_mode(mode)
    source = parse_key(from_key)
    target = parse_key(to_key) if to_key is not None else source

    items = parse_input(text, kind, source, rest_word)
    playable = [(item, item.chord) for item in items if item.playable and item.chord is not None]

    shift = semitone_distance(source.tonic, target.tonic)
    transposed: list[ChordSymbol] = []
    for _, chord in playable:
        moved = transpose_chord(chord, shift, target) if shift else None
        transposed.append(moved or chord)

    voicings = voice_progression(transposed, center_octave, options)

    chords = []
    for index, ((item, original), chord, voicing) in enumerate(zip(playable, transposed, voicings)):
        label, degree = _label(item, original, kind, source)
        chords.append(
            RenderedChord(
                index=index,
                item=item,
                original=original,
                chord=chord,
                label=label,
                degree=degree,
                voicing=voicing,
            )
        )

    return ProgressionRender(
        mode=kind,
        from_key=source,
        to_key=target,
        shift=shift,
        items=items,
        chords=chords,
    )
