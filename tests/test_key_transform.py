"""
Tests for transposition and degree labels.
"""

import pytest

from chuk_mcp_chords.constants import TONICS
from chuk_mcp_chords.core import ChordSymbol, Key, PitchClass
from chuk_mcp_chords.parsing import parse_roman_tokens, select_playable
from chuk_mcp_chords.transform import (
    UNKNOWN_DEGREE,
    degree_for_chord,
    format_symbol,
    semitone_distance,
    transpose_chord,
)


@pytest.fixture
def c_major() -> Key:
    return Key.parse("C_major")


class TestSemitoneDistance:
    """Tests for semitone_distance."""

    def test_short_way_round(self) -> None:
        """Never more than a tritone either way."""
        assert semitone_distance("C", "D") == 2
        assert semitone_distance("C", "G") == -5
        assert semitone_distance("G", "C") == 5
        assert semitone_distance("C", "Bb") == -2
        assert semitone_distance("C", "C") == 0

    def test_tritone_is_antisymmetric(self) -> None:
        """C -> F# and F# -> C have opposite signs."""
        assert semitone_distance("C", "F#") == 6
        assert semitone_distance("F#", "C") == -6

    def test_antisymmetric_for_all_pairs(self) -> None:
        """d(a, b) == -d(b, a) and stays in [-6, 6]."""
        for a in TONICS:
            for b in TONICS:
                distance = semitone_distance(a, b)
                assert -6 <= distance <= 6
                assert distance == -semitone_distance(b, a)

    def test_accepts_keys_and_pitch_classes(self) -> None:
        """Keys and pitch classes work as tonics."""
        assert semitone_distance(Key.parse("A_minor"), PitchClass.B) == 2

    def test_unparseable_is_zero(self) -> None:
        """Unknown tonics mean no shift."""
        assert semitone_distance("H", "C") == 0


class TestTransposeChord:
    """Tests for transpose_chord."""

    def test_root_moves_quality_stays(self) -> None:
        """Only the root moves."""
        chord = transpose_chord("Dm7", 2)
        assert chord is not None
        assert str(chord) == "Em7"

    def test_flats_without_key(self) -> None:
        """No key means flat spellings."""
        chord = transpose_chord("G7", 1)
        assert chord is not None
        assert str(chord) == "Ab7"

    def test_target_key_spelling(self) -> None:
        """The target key decides the spelling."""
        chord = transpose_chord("D", 4, Key.parse("E_major"))
        assert chord is not None
        assert str(chord) == "F#"

    def test_bass_moves_too(self) -> None:
        """Slash basses move with the root."""
        chord = transpose_chord("C/E", 2)
        assert chord is not None
        assert chord.bass == PitchClass.Fs
        assert str(chord) == "D/Gb"

    def test_written_suffix_kept(self) -> None:
        """Aliases survive transposition."""
        chord = transpose_chord("CM7", 5)
        assert chord is not None
        assert str(chord) == "FM7"

    def test_round_trip(self) -> None:
        """Shifting by n then -n gives the same chord."""
        for text in ("Cmaj7", "F#m7b5", "Ab/C", "E7#9"):
            original = ChordSymbol.parse(text)
            for semitones in range(-6, 7):
                moved = transpose_chord(original, semitones)
                assert moved is not None
                assert transpose_chord(moved, -semitones) == original

    def test_unparseable(self) -> None:
        """Unparseable strings give None."""
        assert transpose_chord("xyz", 2) is None


class TestDegreeForChord:
    """Tests for degree_for_chord."""

    def test_sevenths(self, c_major: Key) -> None:
        """Extension tokens follow the numeral."""
        assert degree_for_chord("G7", c_major) == "V7"
        assert degree_for_chord("Dm7", c_major) == "iim7"
        assert degree_for_chord("Cmaj7", c_major) == "Imaj7"
        assert degree_for_chord("Bbmaj7", c_major) == "bVIImaj7"

    def test_triads(self, c_major: Key) -> None:
        """Casing carries the triad family."""
        assert degree_for_chord("F", c_major) == "IV"
        assert degree_for_chord("Am", c_major) == "vi"
        assert degree_for_chord("Bdim", c_major) == "vii°"
        assert degree_for_chord("Eaug", c_major) == "III+"
        assert degree_for_chord("F#", c_major) == "#IV/bV"

    def test_half_diminished(self, c_major: Key) -> None:
        """Half-diminished carries the degree mark and ø."""
        assert degree_for_chord("Bm7b5", c_major) == "vii°ø"
        assert degree_for_chord("F#m7b5", Key.parse("E_minor")) == "ii°ø"

    def test_diminished_seventh(self, c_major: Key) -> None:
        """The dim7 suffix contains 'm7' and is labelled that way."""
        assert degree_for_chord("Bdim7", c_major) == "vii°m7"

    def test_sus(self, c_major: Key) -> None:
        """Suspended chords get 'sus', but a dominant 7 wins."""
        assert degree_for_chord("Csus4", c_major) == "Isus"
        assert degree_for_chord("G7sus4", c_major) == "V7"

    def test_other_key(self) -> None:
        """Degrees are relative to the key's tonic."""
        assert degree_for_chord("Ebmaj7", Key.parse("Bb_major")) == "IVmaj7"

    def test_unknown(self, c_major: Key) -> None:
        """Unparseable chords give '?'."""
        assert degree_for_chord("xyz", c_major) == UNKNOWN_DEGREE

    def test_inverse_of_roman_parsing(self, c_major: Key) -> None:
        """Resolved numerals label back to the same degrees."""
        chords = select_playable(parse_roman_tokens("ii V7 Imaj7 IV vi", c_major))
        labels = [degree_for_chord(chord, c_major) for chord in chords]
        assert labels == ["iim7", "V7", "Imaj7", "IV", "vi"]


class TestFormatSymbol:
    """Tests for format_symbol."""

    def test_plain_and_slash(self) -> None:
        assert format_symbol(ChordSymbol.parse("Am7")) == "Am7"
        assert format_symbol(ChordSymbol.parse("Ab/C")) == "Ab/C"
