"""
Tests for normalization and the chord-symbol parser.
"""

from chuk_mcp_chords.constants import InputKind, ParseStatus
from chuk_mcp_chords.core import ChordQuality, PitchClass
from chuk_mcp_chords.parsing import (
    is_rest_token,
    normalize_token,
    parse_chord_symbol,
    parse_chord_tokens,
    tokenize,
)


class TestNormalize:
    """Tests for the normalization pass."""

    def test_unicode_accidentals(self) -> None:
        """Unicode flats and sharps become ASCII."""
        assert normalize_token("B♭m7") == "Bbm7"
        assert normalize_token("F♯") == "F#"
        assert normalize_token("C＃m") == "C#m"

    def test_triangle(self) -> None:
        """Triangle glyphs mean major seventh."""
        assert normalize_token("C△") == "Cmaj7"
        assert normalize_token("Db△7") == "Dbmaj7"
        assert normalize_token("CΔ9") == "Cmaj9"

    def test_parentheses_flattened(self) -> None:
        """Parenthesized alterations join the symbol."""
        assert normalize_token("Bm7(♭5)") == "Bm7b5"
        assert normalize_token("F♯m（add9）") == "F#madd9"

    def test_full_width_slash(self) -> None:
        """Full-width slash is a slash."""
        assert normalize_token("C／E") == "C/E"


class TestTokenize:
    """Tests for tokenization."""

    def test_separators(self) -> None:
        """Whitespace, commas, bars and arrows all separate."""
        assert tokenize("Fmaj7 E7 | Am7, Dm7 → G7 ⇒ C") == ["Fmaj7", "E7", "Am7", "Dm7", "G7", "C"]

    def test_chord_mode_splits_dashes(self) -> None:
        """Typographic dashes separate chords."""
        assert tokenize("C—G–Am", InputKind.CHORD) == ["C", "G", "Am"]

    def test_ascii_hyphen_between_chords(self) -> None:
        """A hyphen followed by a root separates chords."""
        assert tokenize("Dm7-G7-Cmaj7") == ["Dm7", "G7", "Cmaj7"]
        assert tokenize("Am7-D7") == ["Am7", "D7"]

    def test_ascii_hyphen_kept(self) -> None:
        """The minus-minor alias and a lone rest hyphen survive."""
        assert tokenize("C-7 - G") == ["C-7", "-", "G"]
        assert tokenize("C- F-7-Bb7") == ["C-", "F-7", "Bb7"]

    def test_roman_mode_keeps_dashes(self) -> None:
        """Roman mode does not split on dashes."""
        assert tokenize("2-5-1 IV", InputKind.ROMAN) == ["2-5-1", "IV"]

    def test_empty(self) -> None:
        """Blank input has no tokens."""
        assert tokenize("   ") == []

    def test_rest_tokens(self) -> None:
        """Hyphen and the rest word (optionally parenthesized) are rests."""
        assert is_rest_token("-")
        assert is_rest_token("休")
        assert is_rest_token("(休)")
        assert is_rest_token("（休）")
        assert not is_rest_token("C")
        assert is_rest_token("rest", rest_word="rest")


class TestChordParser:
    """Tests for chord-mode parsing."""

    def test_progression(self) -> None:
        """Every token becomes one OK item, in order."""
        items = parse_chord_tokens("Fmaj7 E7 | Am7, Dm7 → G7")
        assert [item.status for item in items] == [ParseStatus.OK] * 5
        assert [item.index for item in items] == [0, 1, 2, 3, 4]
        assert [str(item.chord) for item in items] == ["Fmaj7", "E7", "Am7", "Dm7", "G7"]

    def test_unicode_chords(self) -> None:
        """Unicode notation resolves."""
        items = parse_chord_tokens("Db△7 Bm7(♭5) F♯7")
        assert items[0].chord is not None
        assert items[0].chord.quality == ChordQuality.MAJOR_7
        assert items[1].chord is not None
        assert items[1].chord.quality == ChordQuality.HALF_DIMINISHED_7
        assert items[2].chord is not None
        assert items[2].chord.root == PitchClass.Fs
        assert items[2].raw == "F♯7"
        assert items[2].normalized == "F#7"

    def test_slash_chord(self) -> None:
        """Slash chords keep their bass."""
        item = parse_chord_tokens("Ab/C")[0]
        assert item.status == ParseStatus.OK
        assert item.chord is not None
        assert item.chord.bass == PitchClass.C

    def test_invalid_bass_warns(self) -> None:
        """A bad bass drops to the plain chord with a warning."""
        item = parse_chord_tokens("C/H")[0]
        assert item.status == ParseStatus.WARN
        assert item.chord is not None
        assert item.chord.bass is None
        assert str(item.chord) == "C"
        assert item.message is not None
        assert "H" in item.message
        assert item.playable

    def test_empty_bass_warns(self) -> None:
        """A trailing slash warns too."""
        item = parse_chord_tokens("G7/")[0]
        assert item.status == ParseStatus.WARN
        assert item.chord is not None
        assert str(item.chord) == "G7"

    def test_unknown_chord_errors(self) -> None:
        """Unrecognized symbols are errors with no chord."""
        items = parse_chord_tokens("C xyz H7 Cwat")
        assert [item.status for item in items] == [
            ParseStatus.OK,
            ParseStatus.ERROR,
            ParseStatus.ERROR,
            ParseStatus.ERROR,
        ]
        assert all(item.chord is None for item in items[1:])
        assert not any(item.playable for item in items[1:])
        assert items[1].message is not None

    def test_rests(self) -> None:
        """Rests are classified, not dropped."""
        items = parse_chord_tokens("C - 休 (休) G")
        assert [item.status for item in items] == [
            ParseStatus.OK,
            ParseStatus.REST,
            ParseStatus.REST,
            ParseStatus.REST,
            ParseStatus.OK,
        ]
        assert items[1].chord is None

    def test_hyphen_minor(self) -> None:
        """A hyphen inside a token is the minor alias."""
        item = parse_chord_tokens("C-7")[0]
        assert item.chord is not None
        assert item.chord.quality == ChordQuality.MINOR_7

    def test_hyphenated_progression(self) -> None:
        """Hyphen-joined chords parse as separate items."""
        items = parse_chord_tokens("Dm7-G7-Cmaj7")
        assert [item.status for item in items] == [ParseStatus.OK] * 3
        assert [str(item.chord) for item in items] == ["Dm7", "G7", "Cmaj7"]
        assert [item.index for item in items] == [0, 1, 2]

    def test_parse_chord_symbol(self) -> None:
        """Single-symbol helper returns None instead of raising."""
        chord = parse_chord_symbol("E♭m7")
        assert chord is not None
        assert chord.root == PitchClass.Ds
        assert parse_chord_symbol("nope") is None
        assert parse_chord_symbol("C/H") is None

    def test_to_dict(self) -> None:
        """Items serialize with enum values."""
        data = parse_chord_tokens("Am7")[0].to_dict()
        assert data["kind"] == "chord"
        assert data["status"] == "ok"
        assert data["chord"]["symbol"] == "Am7"
