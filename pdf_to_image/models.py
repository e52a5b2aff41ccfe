"""Shared data models for the PDF-to-image plugin."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import PurePosixPath
from typing import Any, Union

IMAGE_FORMATS = {
    "png": "PNG",
    "jpeg": "JPEG",
    "webp": "WebP",
}


@dataclass
class Configuration:
    """User-configurable conversion settings.

    A single instance is shared by reference between the settings tab and
    the conversion pipeline, so edits are visible to pages rendered later.
    """

    format: str = "jpeg"
    quality: float = 1
    # NaN when the user typed something that is not a number.
    width: Union[int, float] = 1600

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_SETTINGS = Configuration()


@dataclass(frozen=True)
class SourceFile:
    """A file inside the document store, addressed by its vault-relative path."""

    path: str

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def basename(self) -> str:
        return PurePosixPath(self.path).stem

    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix.lstrip(".").lower()

    @property
    def parent(self) -> str:
        parent = str(PurePosixPath(self.path).parent)
        return "" if parent == "." else parent

    @property
    def parent_is_root(self) -> bool:
        return self.parent == ""
