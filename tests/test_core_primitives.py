"""
Tests for core music primitives.

Tests cover:
- PitchClass and note-name helpers (pitch.py)
- ScaleDegree, KeyMode, Key (scale.py)
- ChordQuality, ChordSymbol (chord.py)
"""

import pytest

from chuk_mcp_chords.core import (
    ChordQuality,
    ChordSymbol,
    Key,
    KeyMode,
    PitchClass,
    QualityFamily,
    ScaleDegree,
    midi_to_frequency,
    midi_to_note_name,
    note_name_to_midi,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.G == 7
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.G.transpose(19) == PitchClass.D

    def test_interval_to(self) -> None:
        """Ascending distance is always 0-11."""
        assert PitchClass.C.interval_to(PitchClass.G) == 7
        assert PitchClass.G.interval_to(PitchClass.C) == 5
        assert PitchClass.D.interval_to(PitchClass.D) == 0

    def test_to_midi(self) -> None:
        """C4 is middle C."""
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.A.to_midi(4) == 69
        assert PitchClass.C.to_midi(-1) == 0

    def test_spell(self) -> None:
        """Spelling follows the flat/sharp preference."""
        assert PitchClass.As.spell() == "A#"
        assert PitchClass.As.spell(prefer_flats=True) == "Bb"
        assert PitchClass.D.spell(prefer_flats=True) == "D"

    def test_parse_spellings(self) -> None:
        """Letters with up to two accidentals parse."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("F#") == PitchClass.Fs
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("Bbb") == PitchClass.A
        assert PitchClass.parse("B#") == PitchClass.C
        assert PitchClass.parse("Cb") == PitchClass.B

    def test_parse_enum_names(self) -> None:
        """Enum member names are accepted too."""
        assert PitchClass.parse("Fs") == PitchClass.Fs

    def test_parse_invalid(self) -> None:
        """Unknown spellings raise."""
        with pytest.raises(ValueError):
            PitchClass.parse("H")
        with pytest.raises(ValueError):
            PitchClass.parse("C###")

    def test_is_spelling(self) -> None:
        """Only letter + accidentals count as spellings."""
        assert PitchClass.is_spelling("Eb")
        assert not PitchClass.is_spelling("Fs")
        assert not PitchClass.is_spelling("")


class TestNoteNames:
    """Tests for MIDI <-> note name helpers."""

    def test_midi_to_note_name(self) -> None:
        """Scientific pitch names with octave."""
        assert midi_to_note_name(60) == "C4"
        assert midi_to_note_name(70) == "A#4"
        assert midi_to_note_name(70, prefer_flats=True) == "Bb4"
        assert midi_to_note_name(21) == "A0"

    def test_note_name_to_midi(self) -> None:
        """Accidentals may cross octave boundaries."""
        assert note_name_to_midi("C4") == 60
        assert note_name_to_midi("Bb3") == 58
        assert note_name_to_midi("Cb4") == 59
        assert note_name_to_midi("B#3") == 60

    def test_note_name_invalid(self) -> None:
        """Names without an octave raise."""
        with pytest.raises(ValueError):
            note_name_to_midi("C")

    def test_frequency(self) -> None:
        """A4 is 440 Hz, octaves double."""
        assert midi_to_frequency(69) == pytest.approx(440.0)
        assert midi_to_frequency(81) == pytest.approx(880.0)
        assert midi_to_frequency(60) == pytest.approx(261.6256, rel=1e-5)


class TestKey:
    """Tests for ScaleDegree and Key."""

    def test_degree_validation(self) -> None:
        """Degrees outside 1-7 are rejected."""
        with pytest.raises(ValueError):
            ScaleDegree(0)
        with pytest.raises(ValueError):
            ScaleDegree(8)

    def test_degree_str(self) -> None:
        """Alterations render as accidentals."""
        assert str(ScaleDegree(7, -1)) == "b7"
        assert str(ScaleDegree(4, 1)) == "#4"

    def test_major_degrees(self) -> None:
        """Degrees resolve through the major scale."""
        key = Key(PitchClass.C)
        assert key.degree_to_pitch(ScaleDegree(5)) == PitchClass.G
        assert key.degree_to_pitch(ScaleDegree(7, -1)) == PitchClass.As

    def test_minor_degrees(self) -> None:
        """Degrees resolve through natural minor."""
        key = Key(PitchClass.A, KeyMode.MINOR)
        assert key.get_pitches() == [
            PitchClass.A,
            PitchClass.B,
            PitchClass.C,
            PitchClass.D,
            PitchClass.E,
            PitchClass.F,
            PitchClass.G,
        ]

    def test_parse_formats(self) -> None:
        """Underscore, space and bare-tonic forms."""
        assert Key.parse("C_major") == Key(PitchClass.C, KeyMode.MAJOR)
        assert Key.parse("Db minor") == Key(PitchClass.Cs, KeyMode.MINOR)
        assert Key.parse("A") == Key(PitchClass.A, KeyMode.MAJOR)
        assert Key.parse("E_natural_minor") == Key(PitchClass.E, KeyMode.MINOR)
        assert Key.parse("G_maj") == Key(PitchClass.G, KeyMode.MAJOR)

    def test_parse_invalid(self) -> None:
        """Bad tonics and modes raise."""
        with pytest.raises(ValueError):
            Key.parse("H_major")
        with pytest.raises(ValueError):
            Key.parse("C_lydian")
        with pytest.raises(ValueError):
            Key.parse("")

    def test_spelling_preference(self) -> None:
        """Flat keys spell flats, sharp keys sharps, minor follows its relative major."""
        assert Key.parse("F_major").spell(PitchClass.As) == "Bb"
        assert Key.parse("E_major").spell(PitchClass.Gs) == "G#"
        assert Key.parse("D_minor").spell(PitchClass.As) == "Bb"
        assert Key.parse("E_minor").spell(PitchClass.Fs) == "F#"

    def test_str(self) -> None:
        """Human-readable key names."""
        assert str(Key.parse("Db_major")) == "Db major"


class TestChordQuality:
    """Tests for the chord quality table."""

    def test_intervals(self) -> None:
        """Intervals are semitones from the root."""
        assert ChordQuality.MAJOR.intervals == (0, 4, 7)
        assert ChordQuality.MAJOR_7.intervals == (0, 4, 7, 11)
        assert ChordQuality.HALF_DIMINISHED_7.intervals == (0, 3, 6, 10)
        assert ChordQuality.DIMINISHED_7.intervals == (0, 3, 6, 9)

    def test_every_quality_has_a_root(self) -> None:
        """Every interval stack starts at the root and ascends."""
        for quality in ChordQuality:
            assert quality.intervals[0] == 0
            assert list(quality.intervals) == sorted(set(quality.intervals))

    def test_families(self) -> None:
        """Families drive roman-numeral casing."""
        assert ChordQuality.MINOR_7.family == QualityFamily.MINOR
        assert ChordQuality.HALF_DIMINISHED_7.family == QualityFamily.HALF_DIMINISHED
        assert ChordQuality.AUGMENTED_7.family == QualityFamily.AUGMENTED
        assert ChordQuality.SEVEN_SUS4.family == QualityFamily.SUSPENDED

    def test_suffix_aliases_are_case_sensitive(self) -> None:
        """M7 is major seventh, m7 is minor seventh."""
        assert ChordQuality.from_suffix("M7") == ChordQuality.MAJOR_7
        assert ChordQuality.from_suffix("m7") == ChordQuality.MINOR_7
        assert ChordQuality.from_suffix("-7") == ChordQuality.MINOR_7
        assert ChordQuality.from_suffix("ø7") == ChordQuality.HALF_DIMINISHED_7
        assert ChordQuality.from_suffix("wat") is None


class TestChordSymbol:
    """Tests for ChordSymbol."""

    def test_parse_simple(self) -> None:
        """Root and suffix."""
        chord = ChordSymbol.parse("Fmaj7")
        assert chord.root == PitchClass.F
        assert chord.quality == ChordQuality.MAJOR_7
        assert chord.bass is None
        assert str(chord) == "Fmaj7"

    def test_parse_slash(self) -> None:
        """Slash bass keeps its spelling."""
        chord = ChordSymbol.parse("Ab/C")
        assert chord.root == PitchClass.Gs
        assert chord.bass == PitchClass.C
        assert str(chord) == "Ab/C"

    def test_parse_invalid(self) -> None:
        """Unknown roots, suffixes and basses raise."""
        with pytest.raises(ValueError):
            ChordSymbol.parse("H7")
        with pytest.raises(ValueError):
            ChordSymbol.parse("Cxyz")
        with pytest.raises(ValueError):
            ChordSymbol.parse("C/H")

    def test_written_suffix_is_kept(self) -> None:
        """Display keeps the written alias, equality is harmonic."""
        chord = ChordSymbol.parse("CM7")
        assert chord.suffix == "M7"
        assert str(chord) == "CM7"
        assert chord == ChordSymbol.parse("Cmaj7")

    def test_enharmonic_equality(self) -> None:
        """Spelling does not affect equality."""
        assert ChordSymbol.parse("C#m") == ChordSymbol.parse("Dbm")

    def test_pitch_classes(self) -> None:
        """Chord tones in interval order."""
        chord = ChordSymbol.parse("G7")
        assert chord.pitch_classes() == [PitchClass.G, PitchClass.B, PitchClass.D, PitchClass.F]

    def test_default_spelling(self) -> None:
        """Chords built from pitch classes spell with flats."""
        chord = ChordSymbol(PitchClass.As, ChordQuality.MINOR_7)
        assert str(chord) == "Bbm7"

    def test_to_dict(self) -> None:
        """Notes follow the root's accidental."""
        data = ChordSymbol.parse("F#m").to_dict()
        assert data["symbol"] == "F#m"
        assert data["quality"] == "minor"
        assert data["notes"] == ["F#", "A", "C#"]
