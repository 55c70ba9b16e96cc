"""
Voicing and playback configuration models.

These are validated once, at construction, so the voicing engine itself
can stay total and never raise.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_chords.constants import (
    DEFAULT_ANCHOR_WEIGHT,
    DEFAULT_BEATS_PER_CHORD,
    DEFAULT_BPM,
    DEFAULT_LEAP_PENALTY_WEIGHT,
    DEFAULT_LEAP_THRESHOLD,
    DEFAULT_RANGE_HIGH,
    DEFAULT_RANGE_LOW,
    DEFAULT_VOICE_COUNT,
    MAX_BEATS_PER_CHORD,
    MAX_BPM,
    MIN_BEATS_PER_CHORD,
    MIN_BPM,
)


class PitchRange(BaseModel):
    """Inclusive MIDI pitch range."""

    low: int = Field(DEFAULT_RANGE_LOW, ge=0, le=127, description="Lowest allowed MIDI note")
    high: int = Field(DEFAULT_RANGE_HIGH, ge=0, le=127, description="Highest allowed MIDI note")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_order(self) -> PitchRange:
        """Low must not exceed high."""
        if self.low > self.high:
            raise ValueError(f"Range low ({self.low}) is above high ({self.high})")
        return self

    def contains(self, pitches: Sequence[int]) -> bool:
        """True if every pitch lies inside the range."""
        return all(self.low <= pitch <= self.high for pitch in pitches)


class VoicingOptions(BaseModel):
    """
    Voicing engine configuration.

    The weights trade off staying close to the previous chord (voice
    leading) against staying near the center register (anchor).
    """

    voice_count: int = Field(
        DEFAULT_VOICE_COUNT, ge=1, le=8, description="Number of simultaneous notes"
    )
    pitch_range: PitchRange = Field(default_factory=PitchRange, description="Allowed pitches")
    include_bass: bool = Field(True, description="Put a slash-chord bass in the lowest voice")
    include_root: bool = Field(True, description="Start from the root when there is no bass")
    register_anchor_weight: float = Field(
        DEFAULT_ANCHOR_WEIGHT, ge=0, description="Pull of the mean pitch toward the center C"
    )
    leap_penalty_weight: float = Field(
        DEFAULT_LEAP_PENALTY_WEIGHT, ge=0, description="Extra cost per semitone beyond the threshold"
    )
    leap_threshold: int = Field(
        DEFAULT_LEAP_THRESHOLD, ge=0, description="Per-voice movement allowed without penalty"
    )

    model_config = {"frozen": True}

    @field_validator("pitch_range", mode="before")
    @classmethod
    def coerce_range(cls, v: Any) -> Any:
        """Accept [low, high] pairs as written in YAML."""
        if isinstance(v, (list, tuple)) and len(v) == 2:
            return {"low": v[0], "high": v[1]}
        return v


class VoicingPreset(BaseModel):
    """A named, shareable set of voicing options."""

    name: str = Field(..., description="Preset name (e.g., 'piano-close')")
    description: str = Field("", description="Human-readable description")
    options: VoicingOptions = Field(default_factory=VoicingOptions)

    model_config = {"frozen": True}


class PlaybackSettings(BaseModel):
    """Timing for rendering a voiced progression."""

    bpm: int = Field(DEFAULT_BPM, ge=MIN_BPM, le=MAX_BPM, description="Tempo in BPM")
    beats_per_chord: int = Field(
        DEFAULT_BEATS_PER_CHORD,
        ge=MIN_BEATS_PER_CHORD,
        le=MAX_BEATS_PER_CHORD,
        description="Beats each chord lasts",
    )
    gate: float = Field(0.9, gt=0, le=1, description="Sounding fraction of each chord slot")
    velocity: float = Field(0.8, ge=0, le=1, description="Velocity (0-1)")

    model_config = {"frozen": True}

    @classmethod
    def clamped(cls, bpm: int, beats_per_chord: int) -> PlaybackSettings:
        """Build settings with tempo and length pulled into their allowed ranges."""
        return cls(
            bpm=min(MAX_BPM, max(MIN_BPM, bpm)),
            beats_per_chord=min(MAX_BEATS_PER_CHORD, max(MIN_BEATS_PER_CHORD, beats_per_chord)),
        )
