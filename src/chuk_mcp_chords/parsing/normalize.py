"""
Normalization pass and tokenizers.

normalize_token() is a pure string -> string rewrite driven by tables:
Unicode accidentals and full-width punctuation become ASCII, the triangle
major-seventh glyph becomes 'maj7', and parenthesized alterations are
flattened into the symbol. Grammar matching happens afterwards, on ASCII.
"""

from __future__ import annotations

import re

from chuk_mcp_chords.constants import (
    COMMON_SEPARATORS,
    DASH_SEPARATORS,
    REST_HYPHEN,
    REST_WORD,
    InputKind,
)

# Single-character substitutions
_CHARACTER_MAP = str.maketrans(
    {
        "♭": "b",
        "♯": "#",
        "＃": "#",
        "（": "(",
        "）": ")",
        "／": "/",
        "＋": "+",
    }
)

# Triangle glyph (white up-pointing triangle or Greek capital delta),
# optionally followed by an extension number: C△ / C△7 -> Cmaj7, CΔ9 -> Cmaj9
_TRIANGLE_RE = re.compile(r"[△Δ](\d*)")

# Bm7(b5) -> Bm7b5, C7(#9) -> C7#9
_PARENTHESIZED_RE = re.compile(r"\(([^()]*)\)")

# An ASCII hyphen separates chords only when a root letter follows it;
# a lone "-" is a rest and "C-7" keeps the minus-minor alias.
_CHORD_SEPARATOR_RE = re.compile(f"(?:[{COMMON_SEPARATORS}{DASH_SEPARATORS}]|-(?=[A-G]))+")
_ROMAN_SEPARATOR_RE = re.compile(f"[{COMMON_SEPARATORS}]+")


def _triangle_to_major(match: re.Match[str]) -> str:
    extension = match.group(1)
    if extension in ("", "7"):
        return "maj7"
    return f"maj{extension}"


def normalize_token(token: str) -> str:
    """
    Rewrite one token into ASCII chord notation.

    Examples:
        'Db△7'    -> 'Dbmaj7'
        'Bm7(♭5)' -> 'Bm7b5'
        'F♯m（add9）' -> 'F#madd9'
    """
    text = token.strip().translate(_CHARACTER_MAP)
    text = _TRIANGLE_RE.sub(_triangle_to_major, text)
    return _PARENTHESIZED_RE.sub(r"\1", text)


def tokenize(text: str, kind: InputKind = InputKind.CHORD) -> list[str]:
    """
    Split input text into non-empty tokens.

    Both modes split on whitespace, commas, vertical bars and arrows.
    Chord mode also splits on dash punctuation and on a hyphen followed by
    a root letter ('Dm7-G7-Cmaj7'); roman mode keeps dashes so that
    shorthand like '2-5-1' survives as one token.
    """
    separator = _CHORD_SEPARATOR_RE if kind == InputKind.CHORD else _ROMAN_SEPARATOR_RE
    return [token for token in separator.split(text) if token.strip()]


def rest_spellings(rest_word: str = REST_WORD) -> frozenset[str]:
    """All tokens that mean 'no chord here'."""
    return frozenset({REST_HYPHEN, rest_word, f"({rest_word})", f"（{rest_word}）"})


def is_rest_token(token: str, rest_word: str = REST_WORD) -> bool:
    """Check whether a token is an intentional rest."""
    return token.strip() in rest_spellings(rest_word)
