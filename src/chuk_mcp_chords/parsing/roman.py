"""
Roman-numeral parser.

Resolves degree notation ('ii V7 Imaj7', 'bVII', 'viiø7') against a key
to concrete chords. Casing carries quality (lowercase = minor); explicit
extensions override it.

Bare ii, V and I get seventh-chord defaults (ii -> m7, V -> 7, I -> maj7)
so that a quick 'ii V I' sounds like the jazz cadence people expect. This is
an input convenience, not harmonic analysis: every other bare numeral stays
a triad.
"""

from __future__ import annotations

import re

from chuk_mcp_chords.constants import (
    REST_WORD,
    TWO_FIVE_ONE,
    ErrorMessages,
    InputKind,
    ParseStatus,
)
from chuk_mcp_chords.core.chord import ChordQuality, ChordSymbol
from chuk_mcp_chords.core.scale import Key, ScaleDegree
from chuk_mcp_chords.parsing.items import ParsedItem
from chuk_mcp_chords.parsing.normalize import is_rest_token, normalize_token, tokenize

_NUMERALS: dict[str, int] = {"I": 1, "II": 2, "III": 3, "IV": 4, "V": 5, "VI": 6, "VII": 7}

_ROMAN_RE = re.compile(r"^(?P<accidentals>[b#]{0,2})(?P<numeral>[IViv]+)(?P<tail>.*)$")

# Shorthand for ii-V-I: 251, 2-5-1, two-five-one, twofiveone
_TWO_FIVE_ONE_TOKEN_RE = re.compile(r"^(?:251|2-5-1|two[-\s]?five[-\s]?one)$", re.IGNORECASE)
# The spelled-out phrase spans whitespace, so it is folded before tokenizing
_TWO_FIVE_ONE_PHRASE_RE = re.compile(r"\btwo[\s-]+five[\s-]+one\b", re.IGNORECASE)
_LOCALIZED_TWO_FIVE_ONE = ("ツーファイブワン",)

# Quality markers in the text after the numeral
_HALF_DIMINISHED_RE = re.compile(r"[øØ]")
_DIMINISHED_RE = re.compile(r"°|dim|o(?![a-z])", re.IGNORECASE)
_AUGMENTED_RE = re.compile(r"\+|aug", re.IGNORECASE)
_LEADING_MARKER_RE = re.compile(r"^(?:[øØ°+]|dim|aug|o(?![a-z]))", re.IGNORECASE)


def expand_aliases(token: str) -> list[str]:
    """Expand ii-V-I shorthand into its three numerals; other tokens pass through."""
    text = token.strip()
    if _TWO_FIVE_ONE_TOKEN_RE.match(text):
        return list(TWO_FIVE_ONE)
    if any(phrase in text for phrase in _LOCALIZED_TWO_FIVE_ONE):
        return list(TWO_FIVE_ONE)
    return [token]


def tokenize_roman(text: str) -> list[str]:
    """Tokenize roman-mode input and expand shorthand in place."""
    folded = _TWO_FIVE_ONE_PHRASE_RE.sub("251", text)
    tokens: list[str] = []
    for token in tokenize(folded, InputKind.ROMAN):
        tokens.extend(expand_aliases(token))
    return tokens


def _base_quality(numeral: str, tail: str) -> ChordQuality:
    """Quality implied by numeral casing and quality markers."""
    if _HALF_DIMINISHED_RE.search(tail):
        return ChordQuality.HALF_DIMINISHED_7
    if _DIMINISHED_RE.search(tail):
        return ChordQuality.DIMINISHED
    if _AUGMENTED_RE.search(tail):
        return ChordQuality.AUGMENTED
    if numeral == numeral.lower():
        return ChordQuality.MINOR
    return ChordQuality.MAJOR


def _default_quality(numeral: str, base: ChordQuality) -> ChordQuality:
    """
    Seventh-chord defaults for bare ii, V and I.

    A convenience for entering ii-V-I progressions, not harmonic analysis.
    Every other bare numeral stays a triad.
    """
    if numeral == "ii":
        return ChordQuality.MINOR_7
    if numeral == "V":
        return ChordQuality.DOMINANT_7
    if numeral == "I":
        return ChordQuality.MAJOR_7
    return base


def _apply_extension(base: ChordQuality, extension: str) -> ChordQuality | None:
    """
    Combine the base quality with an explicit extension.

    Returns None when the extension is not recognized.
    """
    if extension.startswith("m7b5"):
        return ChordQuality.HALF_DIMINISHED_7
    if extension.startswith(("maj7", "M7")):
        if base == ChordQuality.MINOR:
            return ChordQuality.MINOR_MAJOR_7
        if base == ChordQuality.AUGMENTED:
            return ChordQuality.AUGMENTED_MAJOR_7
        return ChordQuality.MAJOR_7
    if extension.startswith("m7"):
        return ChordQuality.MINOR_7
    if extension.startswith("7"):
        return ChordQuality.DOMINANT_7
    if extension.startswith("sus2"):
        return ChordQuality.SUS2
    if extension.startswith("sus"):
        return ChordQuality.SUS4
    if extension.startswith(("add9", "add2")):
        if base == ChordQuality.MINOR:
            return ChordQuality.MINOR_ADD9
        if base == ChordQuality.MAJOR:
            return ChordQuality.ADD9
    return None


def resolve_quality(numeral: str, tail: str) -> tuple[ChordQuality, str | None]:
    """
    Decide the chord quality for a numeral and its trailing text.

    Precedence: half-diminished > diminished seventh > explicit extension
    (m7b5, maj7, m7, 7, sus2, sus4) > add9 on the base triad.

    Returns:
        (quality, unrecognized extension text or None)
    """
    base = _base_quality(numeral, tail)
    if not tail:
        return _default_quality(numeral, base), None

    if base == ChordQuality.HALF_DIMINISHED_7:
        return base, None

    extension = _LEADING_MARKER_RE.sub("", tail, count=1)
    if not extension:
        return base, None

    if base == ChordQuality.DIMINISHED and extension.startswith("7"):
        return ChordQuality.DIMINISHED_7, None

    quality = _apply_extension(base, extension)
    if quality is None:
        return base, extension
    return quality, None


def parse_roman_token(raw: str, index: int, key: Key, rest_word: str = REST_WORD) -> ParsedItem:
    """Classify one roman-mode token against a key."""
    normalized = normalize_token(raw)

    if is_rest_token(raw, rest_word) or is_rest_token(normalized, rest_word):
        return ParsedItem(
            index=index,
            raw=raw,
            kind=InputKind.ROMAN,
            status=ParseStatus.REST,
            normalized=normalized,
        )

    match = _ROMAN_RE.match(normalized)
    degree_number = _NUMERALS.get(match.group("numeral").upper()) if match else None
    if match is None or degree_number is None:
        return ParsedItem(
            index=index,
            raw=raw,
            kind=InputKind.ROMAN,
            status=ParseStatus.ERROR,
            normalized=normalized,
            message=ErrorMessages.UNKNOWN_NUMERAL.format(token=raw),
        )

    accidentals = match.group("accidentals")
    numeral = match.group("numeral")
    tail = match.group("tail").strip()

    alteration = accidentals.count("#") - accidentals.count("b")
    root = key.degree_to_pitch(ScaleDegree(degree_number, alteration))
    quality, unrecognized = resolve_quality(numeral, tail)

    chord = ChordSymbol(root=root, quality=quality, root_name=key.spell(root))
    status = ParseStatus.OK
    message = None
    if unrecognized is not None:
        status = ParseStatus.WARN
        message = ErrorMessages.UNKNOWN_EXTENSION.format(extension=unrecognized, token=raw)

    return ParsedItem(
        index=index,
        raw=raw,
        kind=InputKind.ROMAN,
        status=status,
        normalized=normalized,
        chord=chord,
        degree=f"{accidentals}{numeral}{tail}",
        message=message,
    )


def parse_roman_tokens(text: str, key: Key, rest_word: str = REST_WORD) -> list[ParsedItem]:
    """
    Parse roman-mode input into one ParsedItem per (expanded) token.

    Args:
        text: Free text, e.g. 'ii V7 Imaj7' or '251'
        key: Key the degrees are resolved against
        rest_word: Word treated as a rest (alone or parenthesized)

    Returns:
        List of ParsedItems; shorthand expansions get consecutive indices
    """
    return [
        parse_roman_token(raw, index, key, rest_word)
        for index, raw in enumerate(tokenize_roman(text))
    ]


def select_playable(items: list[ParsedItem]) -> list[ChordSymbol]:
    """Keep the chords of OK/WARN items, in order, dropping diagnostics."""
    return [item.chord for item in items if item.playable and item.chord is not None]
