"""
ParsedItem - the per-token result of both parsers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chuk_mcp_chords.constants import InputKind, ParseStatus
from chuk_mcp_chords.core.chord import ChordSymbol


@dataclass(frozen=True)
class ParsedItem:
    """
    Classification of one input token.

    Every token produces exactly one item, errors included.
    A REST item is intentional silence and carries no chord.
    """

    index: int
    raw: str
    kind: InputKind
    status: ParseStatus
    normalized: str | None = None
    chord: ChordSymbol | None = None
    degree: str | None = None
    message: str | None = None

    @property
    def playable(self) -> bool:
        """OK or WARN with a resolved chord."""
        return self.status in (ParseStatus.OK, ParseStatus.WARN) and self.chord is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "index": self.index,
            "raw": self.raw,
            "kind": self.kind.value,
            "status": self.status.value,
            "normalized": self.normalized,
            "chord": self.chord.to_dict() if self.chord else None,
            "degree": self.degree,
            "message": self.message,
        }
