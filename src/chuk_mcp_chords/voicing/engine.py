"""
Voicing engine - chord symbols to octave-placed pitches.

For each chord:
1. Classify chord tones by role (root, third, seventh, color, fifth)
2. Pick voice_count tones by harmonic importance
3. Stack them close above an anchor in the center register
4. Enumerate inversions x octave shifts inside the pitch range
5. Keep the candidate with the lowest cost: distance from the center
   register plus per-voice movement from the previous voicing

The previous voicing is an explicit argument. voice_progression() is the
left-to-right fold over a progression; each result depends on the one
before it, so results must not be cached per chord.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from chuk_mcp_chords.core.chord import ChordQuality, ChordSymbol
from chuk_mcp_chords.core.pitch import (
    A4_FREQUENCY,
    PitchClass,
    midi_to_frequency,
    midi_to_note_name,
)
from chuk_mcp_chords.models.voicing import VoicingOptions
from chuk_mcp_chords.parsing.chords import parse_chord_symbol

OCTAVE = 12
OCTAVE_SHIFTS: tuple[int, ...] = (-OCTAVE, 0, OCTAVE)


class ToneRole(str, Enum):
    """Function of a chord tone, by semitone offset from the root."""

    ROOT = "root"
    THIRD = "third"
    SEVENTH = "seventh"
    FIFTH = "fifth"
    ALTERED = "altered"  # b9, #11/b5, b13/#5
    TENSION = "tension"  # 9, 11, 13
    OTHER = "other"


_ALTERED_OFFSETS = frozenset({1, 6, 8})
_TENSION_OFFSETS = frozenset({2, 5, 9})


@dataclass(frozen=True)
class ChordTone:
    """A chord tone with its offset from the root and its role."""

    pitch_class: PitchClass
    offset: int
    role: ToneRole


@dataclass(frozen=True)
class VoicingResult:
    """
    A voiced chord: ascending MIDI pitches and their pitch classes.

    An empty result means 'nothing to play' for that position.
    """

    pitches: tuple[int, ...] = ()
    pitch_classes: tuple[PitchClass, ...] = ()

    @classmethod
    def from_pitches(cls, pitches: Iterable[int]) -> VoicingResult:
        ordered = tuple(sorted(pitches))
        return cls(ordered, tuple(PitchClass.from_midi(p) for p in ordered))

    @property
    def is_empty(self) -> bool:
        return not self.pitches

    def note_names(self, prefer_flats: bool = True) -> list[str]:
        """Scientific pitch names, e.g. ['F3', 'A3', 'C4', 'E4']."""
        return [midi_to_note_name(p, prefer_flats) for p in self.pitches]

    def frequencies(self, a4: float = A4_FREQUENCY) -> list[float]:
        """Equal-tempered frequencies in Hz."""
        return [midi_to_frequency(p, a4) for p in self.pitches]

    def to_dict(self) -> dict[str, Any]:
        return {
            "midi": list(self.pitches),
            "notes": self.note_names(),
            "pitch_classes": [pc.spell(prefer_flats=True) for pc in self.pitch_classes],
        }

    def __len__(self) -> int:
        return len(self.pitches)


def _role_for(offset: int, has_major_third: bool, is_diminished_seventh: bool) -> ToneRole:
    if offset == 0:
        return ToneRole.ROOT
    if offset == 4:
        return ToneRole.THIRD
    if offset == 3:
        # Next to a major third, a minor third is really a sharp nine
        return ToneRole.ALTERED if has_major_third else ToneRole.THIRD
    if offset in (10, 11):
        return ToneRole.SEVENTH
    if offset == 9 and is_diminished_seventh:
        return ToneRole.SEVENTH
    if offset == 7:
        return ToneRole.FIFTH
    if offset in _ALTERED_OFFSETS:
        return ToneRole.ALTERED
    if offset in _TENSION_OFFSETS:
        return ToneRole.TENSION
    return ToneRole.OTHER


def classify_tones(chord: ChordSymbol) -> list[ChordTone]:
    """Chord tones with roles, ordered by offset from the root."""
    offsets = [chord.root.interval_to(pc) for pc in chord.pitch_classes()]
    has_major_third = 4 in offsets
    is_diminished_seventh = chord.quality == ChordQuality.DIMINISHED_7

    tones = [
        ChordTone(
            pitch_class=chord.root.transpose(offset),
            offset=offset,
            role=_role_for(offset, has_major_third, is_diminished_seventh),
        )
        for offset in offsets
    ]
    return sorted(tones, key=lambda tone: tone.offset)


def select_tones(chord: ChordSymbol, options: VoicingOptions) -> tuple[list[PitchClass], bool]:
    """
    Choose which pitch classes to sound, most important first.

    Order: slash bass (or root), third, seventh, altered tones, tensions,
    fifth, then the root if still missing; short chords are padded by
    doubling the last tone.

    Returns:
        (selected pitch classes, whether the first one is a slash bass)
    """
    tones = classify_tones(chord)
    limit = options.voice_count
    selected: list[PitchClass] = []
    starts_with_bass = False

    def add(pitch: PitchClass) -> None:
        if pitch not in selected and len(selected) < limit:
            selected.append(pitch)

    if options.include_bass and chord.bass is not None:
        selected.append(chord.bass)
        starts_with_bass = True
    elif options.include_root:
        selected.append(chord.root)

    thirds = [t for t in tones if t.role == ToneRole.THIRD]
    if thirds:
        major = [t for t in thirds if t.offset == 4]
        add((major or thirds)[0].pitch_class)

    sevenths = [t for t in tones if t.role == ToneRole.SEVENTH]
    if sevenths:
        major = [t for t in sevenths if t.offset == 11]
        minor = [t for t in sevenths if t.offset == 10]
        add((major or minor or sevenths)[0].pitch_class)

    for role in (ToneRole.ALTERED, ToneRole.TENSION, ToneRole.FIFTH):
        for tone in tones:
            if tone.role == role:
                add(tone.pitch_class)

    add(chord.root)
    while len(selected) < limit:
        selected.append(selected[-1] if selected else chord.root)

    return selected, starts_with_bass


def center_c(center_octave: int) -> int:
    """MIDI number of C in the center octave (C4 = 60)."""
    return PitchClass.C.to_midi(center_octave)


def nearest_to_anchor(pitch: PitchClass, anchor: int) -> int:
    """Placement of a pitch class closest to an anchor; the lower one on ties."""
    anchor_octave = anchor // OCTAVE - 1
    candidates = [pitch.to_midi(octave) for octave in range(anchor_octave - 2, anchor_octave + 3)]
    return min(candidates, key=lambda midi: abs(midi - anchor))


def place_above(pitch: PitchClass, floor: int) -> int:
    """Closest placement of a pitch class strictly above floor."""
    midi = nearest_to_anchor(pitch, floor + 6)
    while midi <= floor:
        midi += OCTAVE
    return midi


def close_stack(pitches: Sequence[PitchClass], center_octave: int, starts_with_bass: bool) -> list[int]:
    """
    Stack pitch classes upward from the center register.

    The first tone sits nearest the center C (an octave lower for a slash
    bass); each following tone goes just above the one before.
    """
    center = center_c(center_octave)
    anchor = center - OCTAVE if starts_with_bass else center

    stack = [nearest_to_anchor(pitches[0], anchor)]
    for pitch in pitches[1:]:
        stack.append(place_above(pitch, stack[-1]))
    return sorted(stack)


def invert(pitches: Sequence[int]) -> list[int]:
    """Move the lowest pitch up an octave."""
    if len(pitches) <= 1:
        return list(pitches)
    raised = [pitches[0] + OCTAVE, *pitches[1:]]
    return sorted(raised)


def generate_candidates(stack: Sequence[int]) -> list[tuple[int, ...]]:
    """
    Every inversion of the stack, each shifted down, kept, and shifted up.

    Order is inversion-major, octave-shift-minor; the cost scan relies on
    it to break ties the same way every time.
    """
    inversions = [list(stack)]
    for _ in range(1, len(stack)):
        inversions.append(invert(inversions[-1]))

    return [
        tuple(pitch + shift for pitch in inversion)
        for inversion in inversions
        for shift in OCTAVE_SHIFTS
    ]


def voicing_cost(
    candidate: Sequence[int],
    previous: Sequence[int] | None,
    center_octave: int,
    options: VoicingOptions,
) -> float:
    """
    Anchor distance plus voice-leading distance.

    The voice-leading part only applies when previous has the same
    number of voices; each voice moving more than leap_threshold
    semitones pays leap_penalty_weight per extra semitone.
    """
    mean = sum(candidate) / max(1, len(candidate))
    cost = options.register_anchor_weight * abs(mean - center_c(center_octave))

    if not previous or len(previous) != len(candidate):
        return cost

    for current, before in zip(candidate, previous):
        distance = abs(current - before)
        cost += distance
        if distance > options.leap_threshold:
            cost += (distance - options.leap_threshold) * options.leap_penalty_weight
    return cost


def _previous_pitches(previous: VoicingResult | Sequence[int] | None) -> tuple[int, ...] | None:
    if previous is None:
        return None
    if isinstance(previous, VoicingResult):
        return previous.pitches or None
    return tuple(previous) or None


def voice_chord(
    chord: ChordSymbol | str | None,
    center_octave: int = 4,
    previous: VoicingResult | Sequence[int] | None = None,
    options: VoicingOptions | None = None,
) -> VoicingResult:
    """
    Voice one chord, leading smoothly from the previous voicing.

    Args:
        chord: Chord to voice (a symbol string is parsed first)
        center_octave: Octave whose C anchors the register (4 = middle C)
        previous: Voicing of the preceding chord, if any
        options: Voicing options (defaults if omitted)

    Returns:
        VoicingResult with voice_count ascending pitches, or an empty
        result when the chord cannot be resolved
    """
    if isinstance(chord, str):
        chord = parse_chord_symbol(chord)
    if chord is None:
        return VoicingResult()

    options = options or VoicingOptions()
    prior = _previous_pitches(previous)

    pitches, starts_with_bass = select_tones(chord, options)
    stack = close_stack(pitches, center_octave, starts_with_bass)

    in_range = [c for c in generate_candidates(stack) if options.pitch_range.contains(c)]
    pool = in_range or [tuple(stack)]

    best = pool[0]
    best_cost = voicing_cost(best, prior, center_octave, options)
    for candidate in pool[1:]:
        cost = voicing_cost(candidate, prior, center_octave, options)
        if cost < best_cost:
            best = candidate
            best_cost = cost

    return VoicingResult.from_pitches(best)


def voice_progression(
    chords: Iterable[ChordSymbol | str | None],
    center_octave: int = 4,
    options: VoicingOptions | None = None,
) -> list[VoicingResult]:
    """
    Voice a progression left to right.

    Each chord is voiced against the last non-empty voicing before it.
    Unresolvable chords yield empty results in place.
    """
    results: list[VoicingResult] = []
    previous: VoicingResult | None = None
    for chord in chords:
        voicing = voice_chord(chord, center_octave, previous, options)
        results.append(voicing)
        if not voicing.is_empty:
            previous = voicing
    return results


def root_position_notes(chord: ChordSymbol, root_octave: int) -> list[int]:
    """
    Plain root-position stack: root at root_octave, each chord tone just
    above the previous one, slash bass pushed below the root.
    """
    pitches = chord.pitch_classes()
    midis = [pitches[0].to_midi(root_octave)]
    for pitch in pitches[1:]:
        midi = pitch.to_midi(root_octave)
        while midi <= midis[-1]:
            midi += OCTAVE
        midis.append(midi)

    if chord.bass is not None:
        bass = chord.bass.to_midi(root_octave - 1)
        while bass >= midis[0]:
            bass -= OCTAVE
        midis.insert(0, bass)

    return midis
