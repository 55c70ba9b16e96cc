#!/usr/bin/env python3
"""
Example: Inspect parsing diagnostics, degrees and voice leading.

Prints each parsed token, then each voiced chord with its degree and
the notes it plays, so you can see how the voices move.

Usage:
    python examples/voice_leading.py
"""

from chuk_mcp_chords.constants import ParseStatus
from chuk_mcp_chords.pipeline import render_progression


def main() -> None:
    """Print a voiced progression."""
    text = "Fmaj7 E7 Am7 休 Dm7 G7/H Cmaj7 Xyz"
    render = render_progression(text, from_key="C_major", to_key="D_major")

    print(f"Input: {text}")
    print(f"{render.from_key} -> {render.to_key} (shift {render.shift:+d})\n")

    for item in render.items:
        note = f"  {item.message}" if item.message else ""
        print(f"  [{item.status.value:5}] {item.raw}{note}")

    print()
    previous = None
    for rendered in render.pads():
        notes = " ".join(rendered.voicing.note_names())
        movement = ""
        if previous is not None:
            moves = [b - a for a, b in zip(previous.pitches, rendered.voicing.pitches)]
            movement = f"  moves {moves}"
        print(f"  {rendered.degree:8} {str(rendered.chord):8} {notes}{movement}")
        previous = rendered.voicing

    if render.has_errors:
        errors = [item.raw for item in render.items if item.status == ParseStatus.ERROR]
        print(f"\nSkipped: {', '.join(errors)}")


if __name__ == "__main__":
    main()
