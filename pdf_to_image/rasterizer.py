"""PDF page rendering and image encoding with PyMuPDF and Pillow."""

from __future__ import annotations

import io
import logging
import numbers

import fitz  # PyMuPDF
from PIL import Image

from .errors import DocumentOpenFailure, RenderingContextUnavailable
from .models import Configuration
from .utils import bytes_to_data_uri

log = logging.getLogger(__name__)

# Pages are always rendered at twice their natural size. The configured
# width is not applied here.
RENDER_SCALE = 2

# format token -> (Pillow encoder, MIME type, honours quality)
ENCODERS = {
    "png": ("PNG", "image/png", False),
    "jpeg": ("JPEG", "image/jpeg", True),
    "webp": ("WEBP", "image/webp", True),
}
FALLBACK_FORMAT = "png"


def open_document(pdf_bytes: bytes) -> fitz.Document:
    """Parse *pdf_bytes* into a PyMuPDF document."""
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        raise DocumentOpenFailure(f"Could not open PDF: {exc}") from exc
    if doc.needs_pass:
        doc.close()
        raise DocumentOpenFailure("Could not open PDF: document is encrypted")
    return doc


def render_page_to_image_data(page: fitz.Page, settings: Configuration) -> str:
    """Render one page at ``RENDER_SCALE`` and encode it as a data URI.

    The format and quality are read from *settings* at call time.
    """
    matrix = fitz.Matrix(RENDER_SCALE, RENDER_SCALE)
    viewport = page.rect * matrix
    width, height = int(viewport.width), int(viewport.height)
    if width <= 0 or height <= 0:
        raise RenderingContextUnavailable(
            f"Failed to get 2D rendering surface for page {page.number + 1}: "
            f"empty viewport {width}x{height}"
        )

    try:
        pix = page.get_pixmap(matrix=matrix, alpha=False)
    except MemoryError as exc:
        raise RenderingContextUnavailable(
            f"Failed to allocate {width}x{height} surface for page {page.number + 1}"
        ) from exc

    image = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
    log.debug(
        "Rendered page %s at %sx%s", page.number + 1, pix.width, pix.height
    )
    return encode_image(image, settings.format, settings.quality)


def encode_image(image: Image.Image, fmt: str, quality: float) -> str:
    """Encode *image* as a data URI.

    Formats without an encoder fall back to PNG. Quality is a fraction in
    [0, 1] and only affects lossy formats.
    """
    if fmt not in ENCODERS:
        log.warning("No encoder for image format %r; falling back to PNG", fmt)
        fmt = FALLBACK_FORMAT
    encoder, mime, lossy = ENCODERS[fmt]

    options = {}
    if lossy:
        options["quality"] = _quality_percent(quality)

    buf = io.BytesIO()
    image.save(buf, format=encoder, **options)
    return bytes_to_data_uri(buf.getvalue(), mime)


def _quality_percent(quality: float) -> int:
    if (
        isinstance(quality, bool)
        or not isinstance(quality, numbers.Real)
        or not 0 <= quality <= 1
    ):
        raise ValueError(f"Image quality must be between 0 and 1, got {quality!r}")
    return round(quality * 100)
