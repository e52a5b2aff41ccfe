"""Convert every page of a PDF in the vault into an image file."""

from __future__ import annotations

import logging
import time

from .editor import Workspace
from .models import Configuration, SourceFile
from .rasterizer import open_document, render_page_to_image_data
from .store import DocumentStore
from .utils import data_uri_to_bytes

log = logging.getLogger(__name__)


def generate_image_file_name(
    file: SourceFile, page_number: int, settings: Configuration
) -> str:
    """``<basename>_p<page>.<format>`` next to *file* (no leading slash at root)."""
    new_file_name = f"{file.basename}_p{page_number}.{settings.format}"
    if file.parent_is_root:
        return new_file_name
    return f"{file.parent}/{new_file_name}"


def save_image_file(store: DocumentStore, file_name: str, image_data: str) -> None:
    buffer = data_uri_to_bytes(image_data)
    store.create_binary(file_name, buffer)


def insert_image_link(workspace: Workspace, file_name: str) -> bool:
    """Embed *file_name* at the cursor of whichever editor has focus now."""
    editor = workspace.get_active_editor()
    if editor is None:
        log.debug("No active editor; link to %s not inserted", file_name)
        return False
    editor.replace_selection(f"![[{file_name}]]\n")
    return True


def convert_pdf_to_images(
    file: SourceFile,
    *,
    store: DocumentStore,
    settings: Configuration,
    workspace: Workspace,
    show_progress: bool = False,
) -> None:
    """Write one image per page of *file* and link each into the active note.

    Pages are handled strictly in order. Any failure aborts the remaining
    pages; images already written are left in place.
    """
    t0 = time.perf_counter()
    pdf_bytes = store.read_binary(file)
    log.info("convert_pdf_to_images: START - %s (%s bytes)", file.path, len(pdf_bytes))

    with open_document(pdf_bytes) as pdf_document:
        num_pages = pdf_document.page_count
        log.info("convert_pdf_to_images: %s has %s pages", file.name, num_pages)

        page_numbers = range(1, num_pages + 1)
        if show_progress:
            from tqdm import tqdm

            page_numbers = tqdm(page_numbers, desc=file.basename, unit="page")

        for page_number in page_numbers:
            page = pdf_document.load_page(page_number - 1)
            image_data = render_page_to_image_data(page, settings)
            new_file_name = generate_image_file_name(file, page_number, settings)
            save_image_file(store, new_file_name, image_data)
            insert_image_link(workspace, new_file_name)
            log.info(
                "convert_pdf_to_images: page %s/%s -> %s",
                page_number,
                num_pages,
                new_file_name,
            )

    log.info(
        "convert_pdf_to_images: DONE - %s in %.2fs",
        file.path,
        time.perf_counter() - t0,
    )
