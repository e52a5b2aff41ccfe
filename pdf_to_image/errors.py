"""Exceptions raised while converting PDF pages to images."""


class PdfToImageError(Exception):
    """Base class for conversion failures."""


class PickerCancelled(PdfToImageError):
    """The user closed the file picker without choosing a PDF."""


class DocumentOpenFailure(PdfToImageError):
    """The PDF bytes could not be read or parsed."""


class RenderingContextUnavailable(PdfToImageError):
    """No drawing surface could be allocated for a page."""


class StoreWriteFailure(PdfToImageError):
    """The document store rejected a file write."""
