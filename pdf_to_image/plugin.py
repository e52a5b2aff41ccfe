"""Plugin wiring: settings, the convert command and the settings tab."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .conversion import convert_pdf_to_images
from .editor import Workspace
from .errors import PickerCancelled
from .models import Configuration
from .picker import FilePicker
from .settings import SettingsStore, SettingsTab
from .store import DocumentStore

log = logging.getLogger(__name__)

CONVERT_COMMAND_ID = "pdf-to-image"


@dataclass
class Command:
    id: str
    name: str
    callback: Callable[..., Any]


class PDFToImagePlugin:
    def __init__(
        self,
        store: DocumentStore,
        workspace: Workspace,
        settings_store: SettingsStore,
    ) -> None:
        self.store = store
        self.workspace = workspace
        self.settings_store = settings_store
        self.settings: Configuration = Configuration()
        self.commands: dict[str, Command] = {}
        self.settings_tab: Optional[SettingsTab] = None

    def onload(self) -> None:
        self.load_settings()
        self.add_commands()
        self.settings_tab = SettingsTab(self.settings, self.settings_store)

    def load_settings(self) -> None:
        self.settings = self.settings_store.load()

    def save_settings(self) -> None:
        self.settings_store.save(self.settings)

    def add_commands(self) -> None:
        self.add_command(
            Command(
                id=CONVERT_COMMAND_ID,
                name="Convert PDF to Images",
                callback=self.open_picker_and_convert,
            )
        )

    def add_command(self, command: Command) -> None:
        self.commands[command.id] = command
        log.debug("Registered command %s (%s)", command.id, command.name)

    def run_command(self, command_id: str, **kwargs: Any) -> Any:
        try:
            command = self.commands[command_id]
        except KeyError:
            raise KeyError(f"Unknown command: {command_id}") from None
        log.info("Running command: %s", command.name)
        return command.callback(**kwargs)

    def open_picker_and_convert(
        self,
        query: Optional[str] = None,
        picker: Optional[FilePicker] = None,
        show_progress: bool = False,
    ) -> None:
        picker = picker or FilePicker(self.store)
        try:
            file = picker.choose(query)
        except PickerCancelled as exc:
            log.info("Picker closed: %s", exc)
            return
        convert_pdf_to_images(
            file,
            store=self.store,
            settings=self.settings,
            workspace=self.workspace,
            show_progress=show_progress,
        )
