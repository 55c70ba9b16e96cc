#!/usr/bin/env python3
"""
Example: Voice a progression and save it as MIDI.

This demonstrates the full pipeline from text to a playable MIDI file.

Usage:
    python examples/generate_midi.py
    # Creates: examples/output/two_five_one.mid, examples/output/borrowed.mid
"""

from pathlib import Path

from chuk_mcp_chords.compiler import progression_to_midi
from chuk_mcp_chords.models import PlaybackSettings
from chuk_mcp_chords.pipeline import render_progression
from chuk_mcp_chords.voicing import PresetLoader


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)
    presets = PresetLoader()

    # Example 1: ii-V-I shorthand in Bb, rootless comping voicing
    print("Generating two_five_one.mid...")
    render = render_progression(
        "251 251",
        mode="roman",
        from_key="Bb_major",
        options=presets.get_options("piano-rootless"),
    )
    mid = progression_to_midi(render, PlaybackSettings(bpm=120, beats_per_chord=4))
    mid.save(str(output_dir / "two_five_one.mid"))
    print(f"  Created: {output_dir / 'two_five_one.mid'}")

    # Example 2: Chord symbols written in C, played in E
    print("\nGenerating borrowed.mid...")
    render = render_progression(
        "C△7 | A♭△7 | F-7 | G7sus4 → G7",
        mode="chord",
        from_key="C_major",
        to_key="E_major",
        options=presets.get_options("pad-wide"),
    )
    mid = progression_to_midi(render, PlaybackSettings(bpm=72, beats_per_chord=8))
    mid.save(str(output_dir / "borrowed.mid"))
    print(f"  Created: {output_dir / 'borrowed.mid'}")
    print(f"  Played as: {' '.join(str(r.chord) for r in render.chords)}")

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
