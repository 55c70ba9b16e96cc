"""
Text parsing - chord symbols and roman numerals to ParsedItems.

Both parsers share one normalization pass and never raise for
malformed input: each token yields exactly one ParsedItem.
"""

from chuk_mcp_chords.parsing.chords import (
    parse_chord_symbol,
    parse_chord_token,
    parse_chord_tokens,
)
from chuk_mcp_chords.parsing.items import ParsedItem
from chuk_mcp_chords.parsing.normalize import is_rest_token, normalize_token, tokenize
from chuk_mcp_chords.parsing.roman import (
    expand_aliases,
    parse_roman_token,
    parse_roman_tokens,
    resolve_quality,
    select_playable,
    tokenize_roman,
)

__all__ = [
    "ParsedItem",
    # Normalization
    "normalize_token",
    "tokenize",
    "is_rest_token",
    # Chord symbols
    "parse_chord_symbol",
    "parse_chord_token",
    "parse_chord_tokens",
    # Roman numerals
    "expand_aliases",
    "tokenize_roman",
    "resolve_quality",
    "parse_roman_token",
    "parse_roman_tokens",
    "select_playable",
]
