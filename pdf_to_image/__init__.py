"""Convert PDF pages in a notes vault into image files.

Public API -- all symbols that tests and external code import live here.
Internally the code is split across focused submodules; this file
re-exports the stable public surface so ``from pdf_to_image import X`` works.
"""

from .conversion import (
    convert_pdf_to_images,
    generate_image_file_name,
    insert_image_link,
    save_image_file,
)
from .editor import Editor, MarkdownEditor, Workspace
from .errors import (
    DocumentOpenFailure,
    PdfToImageError,
    PickerCancelled,
    RenderingContextUnavailable,
    StoreWriteFailure,
)
from .models import DEFAULT_SETTINGS, IMAGE_FORMATS, Configuration, SourceFile
from .picker import FilePicker, fuzzy_match, get_item_text, list_candidates, rank
from .plugin import CONVERT_COMMAND_ID, Command, PDFToImagePlugin
from .rasterizer import (
    RENDER_SCALE,
    encode_image,
    open_document,
    render_page_to_image_data,
)
from .settings import SettingsStore, SettingsTab, default_settings_path
from .store import DocumentStore, VaultStore
from .utils import bytes_to_data_uri, data_uri_to_bytes, parse_int

__all__ = [
    # Models
    "Configuration",
    "SourceFile",
    "DEFAULT_SETTINGS",
    "IMAGE_FORMATS",
    # Errors
    "PdfToImageError",
    "PickerCancelled",
    "DocumentOpenFailure",
    "RenderingContextUnavailable",
    "StoreWriteFailure",
    # Utils
    "parse_int",
    "bytes_to_data_uri",
    "data_uri_to_bytes",
    # Settings
    "SettingsStore",
    "SettingsTab",
    "default_settings_path",
    # Store and editor
    "DocumentStore",
    "VaultStore",
    "Editor",
    "MarkdownEditor",
    "Workspace",
    # Picker
    "FilePicker",
    "list_candidates",
    "get_item_text",
    "fuzzy_match",
    "rank",
    # Rendering
    "RENDER_SCALE",
    "open_document",
    "render_page_to_image_data",
    "encode_image",
    # Conversion
    "generate_image_file_name",
    "save_image_file",
    "insert_image_link",
    "convert_pdf_to_images",
    # Plugin
    "Command",
    "CONVERT_COMMAND_ID",
    "PDFToImagePlugin",
]
