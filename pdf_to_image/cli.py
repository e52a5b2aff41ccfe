"""CLI entrypoint for converting PDF pages in a vault into images.

Usage:
    python -m pdf_to_image --vault ./notes convert
    python -m pdf_to_image --vault ./notes convert "annual report" --note Inbox.md
    python -m pdf_to_image --vault ./notes settings --format png --quality 0.8
    python -m pdf_to_image --vault ./notes list
"""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

log = logging.getLogger(__name__)


def _setup_logging(
    *,
    verbose: bool,
    detailed_logging: bool,
    vault: Path,
    log_file: Path | None,
) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    root_level = logging.DEBUG if verbose else logging.INFO
    root_logger.setLevel(root_level)

    console_fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    detailed_fmt = (
        "%(asctime)s | %(levelname)-8s | %(name)s | "
        "%(threadName)s | %(filename)s:%(lineno)d | %(message)s"
    )
    formatter = logging.Formatter(
        detailed_fmt if detailed_logging else console_fmt,
        "%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(root_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    resolved_log_file = log_file
    if resolved_log_file is None and detailed_logging:
        resolved_log_file = vault / ".pdf-to-image.log"

    if resolved_log_file is not None:
        resolved_log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            resolved_log_file,
            maxBytes=20 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(detailed_fmt, "%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

    logging.getLogger("PIL").setLevel(logging.WARNING)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    from .models import IMAGE_FORMATS

    parser = argparse.ArgumentParser(description="Convert PDF pages in a vault to images")
    parser.add_argument(
        "--vault",
        type=Path,
        default=Path("."),
        help="Vault directory (default: current directory)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--detailed-logging",
        action="store_true",
        help="Enable detailed logging (thread, file/line, rotating log file)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help=(
            "Optional log file path "
            "(default: <vault>/.pdf-to-image.log in detailed mode)"
        ),
    )

    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert PDF to Images")
    convert.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Fuzzy name of the PDF to convert (prompts when omitted)",
    )
    convert.add_argument(
        "--note",
        default=None,
        help="Vault-relative markdown note that receives the image links",
    )
    convert.add_argument(
        "--cursor",
        type=int,
        default=None,
        help="Character offset in --note to insert at (default: end of note)",
    )
    convert.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the per-page progress bar",
    )

    settings = sub.add_parser("settings", help="Show or change PDF to Image settings")
    settings.add_argument("--format", choices=list(IMAGE_FORMATS), default=None)
    settings.add_argument("--quality", type=float, default=None)
    settings.add_argument("--width", default=None)

    sub.add_parser("list", help="List PDF files in the vault")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run one plugin command against a vault."""
    from .editor import MarkdownEditor, Workspace
    from .picker import get_item_text, list_candidates
    from .plugin import CONVERT_COMMAND_ID, PDFToImagePlugin
    from .settings import SettingsStore, default_settings_path
    from .store import VaultStore

    args = parse_args(argv)
    _setup_logging(
        verbose=args.verbose,
        detailed_logging=args.detailed_logging,
        vault=args.vault,
        log_file=args.log_file,
    )

    store = VaultStore(args.vault)
    workspace = Workspace()
    if args.command == "convert" and args.note:
        workspace.active_editor = MarkdownEditor(args.vault, args.note, args.cursor)

    plugin = PDFToImagePlugin(
        store,
        workspace,
        SettingsStore(default_settings_path(args.vault)),
    )
    plugin.onload()
    log.debug("Loaded plugin with settings %s", plugin.settings)

    if args.command == "convert":
        plugin.run_command(
            CONVERT_COMMAND_ID,
            query=args.query,
            show_progress=not args.no_progress,
        )
    elif args.command == "settings":
        tab = plugin.settings_tab
        if args.format is not None:
            tab.set_format(args.format)
        if args.quality is not None:
            tab.set_quality(args.quality)
        if args.width is not None:
            tab.set_width(args.width)
        print("\n".join(tab.display()))
    elif args.command == "list":
        for file in list_candidates(store):
            print(f"{get_item_text(file)}\t{file.path}")
