"""
MIDI export - the end of the pipeline.

This module turns voiced progressions into MIDI files using mido.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_chords.models.voicing import PlaybackSettings

if TYPE_CHECKING:
    from chuk_mcp_chords.pipeline import ProgressionRender
    from chuk_mcp_chords.voicing.engine import VoicingResult


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    This is the lowest-level representation before writing to MIDI.
    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick, so repeated pitches retrigger
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off", x[1].note))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def voicings_to_events(
    voicings: Sequence[VoicingResult],
    settings: PlaybackSettings | None = None,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay voicings out back to back, one chord slot each.

    Chord i starts at i * beats_per_chord and sounds for gate of its
    slot. Empty voicings keep their slot as silence.
    """
    settings = settings or PlaybackSettings()
    slot_ticks = beats_to_ticks(settings.beats_per_chord, ticks_per_beat)
    duration = max(1, int(slot_ticks * settings.gate))
    velocity = velocity_float_to_int(settings.velocity)

    events: list[MidiEvent] = []
    for index, voicing in enumerate(voicings):
        start = index * slot_ticks
        for pitch in voicing.pitches:
            events.append(
                MidiEvent(
                    pitch=pitch,
                    start_ticks=start,
                    duration_ticks=duration,
                    velocity=velocity,
                    channel=channel,
                )
            )
    return events


def progression_to_midi(
    render: ProgressionRender,
    settings: PlaybackSettings | None = None,
) -> MidiFile:
    """
    Export a rendered progression as a MIDI file.

    Example:
        render = render_progression("Dm7 G7 Cmaj7")
        progression_to_midi(render, PlaybackSettings(bpm=100)).save("251.mid")
    """
    settings = settings or PlaybackSettings()
    events = voicings_to_events(render.voicings, settings)
    return events_to_midi(events, tempo_bpm=settings.bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def velocity_float_to_int(velocity: float) -> int:
    """Convert velocity from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(velocity * 127)))
