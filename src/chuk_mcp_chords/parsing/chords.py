"""
Chord-symbol parser.

Turns free text like 'Fmaj7 E7 | Am7, Dm7 → G7' into ParsedItems.
Never raises: malformed tokens come back with status ERROR or WARN.
"""

from __future__ import annotations

from dataclasses import replace

from chuk_mcp_chords.constants import REST_WORD, ErrorMessages, InputKind, ParseStatus
from chuk_mcp_chords.core.chord import ChordSymbol
from chuk_mcp_chords.core.pitch import PitchClass
from chuk_mcp_chords.parsing.items import ParsedItem
from chuk_mcp_chords.parsing.normalize import is_rest_token, normalize_token, tokenize


def parse_chord_symbol(text: str) -> ChordSymbol | None:
    """
    Parse a single chord symbol (Unicode notation allowed).

    Returns None when the symbol or its bass cannot be resolved.
    """
    try:
        return ChordSymbol.parse(normalize_token(text))
    except ValueError:
        return None


def parse_chord_token(raw: str, index: int, rest_word: str = REST_WORD) -> ParsedItem:
    """Classify one chord-mode token."""
    normalized = normalize_token(raw)

    if is_rest_token(raw, rest_word) or is_rest_token(normalized, rest_word):
        return ParsedItem(
            index=index,
            raw=raw,
            kind=InputKind.CHORD,
            status=ParseStatus.REST,
            normalized=normalized,
        )

    symbol, has_slash, bass = normalized.partition("/")

    try:
        chord = ChordSymbol.parse(symbol)
    except ValueError:
        return ParsedItem(
            index=index,
            raw=raw,
            kind=InputKind.CHORD,
            status=ParseStatus.ERROR,
            normalized=normalized,
            message=ErrorMessages.UNKNOWN_CHORD.format(symbol=symbol or raw),
        )

    if has_slash:
        if not PitchClass.is_spelling(bass):
            return ParsedItem(
                index=index,
                raw=raw,
                kind=InputKind.CHORD,
                status=ParseStatus.WARN,
                normalized=normalized,
                chord=chord,
                message=ErrorMessages.INVALID_BASS.format(bass=bass, symbol=symbol),
            )
        chord = replace(chord, bass=PitchClass.parse(bass), bass_name=bass)

    return ParsedItem(
        index=index,
        raw=raw,
        kind=InputKind.CHORD,
        status=ParseStatus.OK,
        normalized=normalized,
        chord=chord,
    )


def parse_chord_tokens(text: str, rest_word: str = REST_WORD) -> list[ParsedItem]:
    """
    Parse chord-mode input into one ParsedItem per token, in input order.

    Args:
        text: Free text, e.g. 'Db Ab/C Bbm7 Gbmaj7'
        rest_word: Word treated as a rest (alone or parenthesized)

    Returns:
        List of ParsedItems; indices follow token positions
    """
    return [
        parse_chord_token(raw, index, rest_word)
        for index, raw in enumerate(tokenize(text, InputKind.CHORD))
    ]
