"""
Preset loader - discovers and loads voicing presets.

Presets can come from:
1. Built-in library (shipped with package)
2. Project presets (user's project/voicings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_chords.models.voicing import VoicingOptions, VoicingPreset

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "piano-close"


class PresetLoader:
    """
    Discovers and loads voicing presets.

    Presets are loaded from YAML files in the library and project directories.
    Project presets override library presets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the preset loader.

        Args:
            library_path: Path to built-in preset library
            project_path: Path to project presets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, VoicingPreset] = {}

    def list_presets(self) -> list[VoicingPreset]:
        """
        List all available presets, sorted by name.

        Project presets replace library presets of the same name.
        """
        presets: dict[str, VoicingPreset] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                preset = self._load_preset_file(path)
                if preset:
                    presets[preset.name] = preset

        return [presets[name] for name in sorted(presets)]

    def get_preset(self, name: str) -> VoicingPreset | None:
        """
        Get a preset by name.

        Args:
            name: Preset name

        Returns:
            VoicingPreset if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        candidates = [self.project_path, self.library_path]
        for directory in candidates:
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                preset = self._load_preset_file(path)
                if preset:
                    self._cache[name] = preset
                    return preset

        return None

    def get_options(self, name: str | None) -> VoicingOptions | None:
        """
        Voicing options for a preset name.

        None or an empty name gives the default options; an unknown name
        gives None so callers can report it.
        """
        if not name:
            return VoicingOptions()
        preset = self.get_preset(name)
        return preset.options if preset else None

    def _load_preset_file(self, path: Path) -> VoicingPreset | None:
        """Load a preset from a YAML file, skipping files that do not validate."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            return self._parse_preset(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning(f"Skipping voicing preset {path}: {e}")
            return None

    def _parse_preset(self, data: dict[str, Any], default_name: str) -> VoicingPreset:
        """Parse a preset from YAML data."""
        if not isinstance(data, dict):
            raise TypeError("preset file must contain a mapping")

        return VoicingPreset(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            options=VoicingOptions.model_validate(data.get("options") or {}),
        )

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()
