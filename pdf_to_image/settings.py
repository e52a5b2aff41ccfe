"""Plugin settings: persisted record and the settings form bound to it."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from .models import DEFAULT_SETTINGS, IMAGE_FORMATS, Configuration
from .utils import (
    CONFIG_DIR_NAME,
    PLUGIN_ID,
    SETTINGS_FILE_NAME,
    load_json_record,
    parse_int,
    save_json_record,
)

log = logging.getLogger(__name__)

QUALITY_MIN = 0.0
QUALITY_MAX = 1.0
QUALITY_STEP = 0.1
WIDTH_PLACEHOLDER = "1600"

_FIELD_NAMES = tuple(f.name for f in fields(Configuration))


def default_settings_path(vault_root: Path) -> Path:
    """Where the plugin record lives inside a vault."""
    return vault_root / CONFIG_DIR_NAME / "plugins" / PLUGIN_ID / SETTINGS_FILE_NAME


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class SettingsStore:
    """Loads and saves the plugin's single settings record."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Configuration:
        """Overlay persisted values onto the defaults."""
        persisted = load_json_record(self.path)
        values = DEFAULT_SETTINGS.to_dict()
        for key, value in persisted.items():
            if key in _FIELD_NAMES:
                values[key] = value
            else:
                log.debug("Ignoring unknown settings key %r in %s", key, self.path)
        config = Configuration(**values)
        log.debug("Loaded settings from %s: %s", self.path, config)
        return config

    def save(self, config: Configuration) -> None:
        save_json_record(self.path, config.to_dict())
        log.debug("Saved settings to %s: %s", self.path, config)


# ---------------------------------------------------------------------------
# Settings form
# ---------------------------------------------------------------------------


@dataclass
class Control:
    """Description of one form control."""

    key: str
    name: str
    desc: str
    kind: str  # "dropdown", "slider" or "text"
    value: Any
    options: dict[str, str] = field(default_factory=dict)
    limits: Optional[tuple[float, float, float]] = None
    placeholder: str = ""


class SettingsTab:
    """The settings form. Every change is persisted immediately."""

    heading = "PDF to Image Settings"

    def __init__(self, settings: Configuration, store: SettingsStore) -> None:
        self.settings = settings
        self.store = store

    def controls(self) -> list[Control]:
        return [
            Control(
                key="format",
                name="Image Format",
                desc="The format of the converted images",
                kind="dropdown",
                value=self.settings.format,
                options=dict(IMAGE_FORMATS),
            ),
            Control(
                key="quality",
                name="Image Quality",
                desc="The quality of the converted images",
                kind="slider",
                value=self.settings.quality,
                limits=(QUALITY_MIN, QUALITY_MAX, QUALITY_STEP),
            ),
            Control(
                key="width",
                name="Image Width",
                desc="The width of the converted images",
                kind="text",
                value=_format_width(self.settings.width),
                placeholder=WIDTH_PLACEHOLDER,
            ),
        ]

    def display(self) -> list[str]:
        """Render the form as plain text lines."""
        lines = [self.heading, ""]
        for control in self.controls():
            lines.append(f"{control.name}: {control.value}")
            lines.append(f"  {control.desc}")
            if control.options:
                lines.append(f"  options: {', '.join(control.options)}")
            if control.limits:
                lo, hi, step = control.limits
                lines.append(f"  range: {lo:g}-{hi:g} (step {step:g})")
        return lines

    def set_format(self, value: str) -> None:
        if value not in IMAGE_FORMATS:
            raise ValueError(
                f"Unknown image format {value!r}; expected one of {', '.join(IMAGE_FORMATS)}"
            )
        self.settings.format = value
        self.store.save(self.settings)

    def set_quality(self, value: float) -> None:
        self.settings.quality = _snap_quality(float(value))
        self.store.save(self.settings)

    def set_width(self, text: str) -> None:
        width = parse_int(text)
        if isinstance(width, float):
            log.warning("Image width %r is not a number; stored as NaN", text)
        self.settings.width = width
        self.store.save(self.settings)


def _snap_quality(value: float) -> float:
    clamped = min(QUALITY_MAX, max(QUALITY_MIN, value))
    return round(round(clamped / QUALITY_STEP) * QUALITY_STEP, 1)


def _format_width(width: Any) -> str:
    if isinstance(width, float) and math.isnan(width):
        return "NaN"
    return str(width)
