"""Cross-cutting helpers: constants, integer parsing, data URIs, JSON records."""

from __future__ import annotations

import base64
import binascii
import json
import re
from pathlib import Path
from typing import Any, Union

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PLUGIN_ID = "pdf-to-image"
SETTINGS_FILE_NAME = "data.json"
CONFIG_DIR_NAME = ".obsidian"
PDF_EXTENSION = "pdf"

_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def parse_int(text: Any) -> Union[int, float]:
    """Parse the leading integer of *text*, or return NaN.

    Mirrors the forgiving behaviour of a browser text field: ``" 42px"``
    gives 42, ``"1e3"`` gives 1 and ``"abc"`` gives NaN.
    """
    m = _INT_PREFIX_RE.match(str(text))
    if not m:
        return float("nan")
    return int(m.group(1))


# ---------------------------------------------------------------------------
# Data URIs
# ---------------------------------------------------------------------------


def bytes_to_data_uri(data: bytes, mime: str) -> str:
    """Encode *data* as a base64 ``data:`` URI."""
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def data_uri_to_bytes(data_uri: str) -> bytes:
    """Decode the base64 payload of a ``data:`` URI into raw bytes."""
    _header, sep, payload = data_uri.partition(",")
    if not sep:
        raise ValueError("Not a data URI: missing ',' separator")
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 payload in data URI: {exc}") from exc


# ---------------------------------------------------------------------------
# JSON record I/O
# ---------------------------------------------------------------------------


def load_json_record(path: Path) -> dict[str, Any]:
    """Load a JSON object from *path*; anything unusable loads as ``{}``."""
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            record = json.load(fh)
    except (json.JSONDecodeError, OSError, ValueError):
        return {}

    if not isinstance(record, dict):
        return {}
    return record


def save_json_record(path: Path, record: dict[str, Any]) -> Path:
    """Persist *record* as JSON, replacing any previous content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(record, fh, indent=2, ensure_ascii=False)
    return path
