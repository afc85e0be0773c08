"""
Document surfaces: where rendered notes are written.
"""

import os
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..core.interfaces import DocumentSurface, EditableDocument


class MarkdownNote(EditableDocument):
    """A Markdown file on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def replace_content(self, text: str) -> None:
        # Old content stays intact until the new file is complete.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            temp_path.write_text(text, encoding="utf-8")
            os.replace(temp_path, self.path)
        except OSError:
            if temp_path.exists():
                temp_path.unlink()
            raise


class NoteFileSurface(DocumentSurface):
    """Surface whose active document is a single note file, if one was given."""

    def __init__(self, note_path: Optional[Path]):
        self.note_path = Path(note_path) if note_path else None

    def get_active_document(self) -> Optional[EditableDocument]:
        if self.note_path is None:
            return None
        return MarkdownNote(self.note_path)


class ConsoleDocument(EditableDocument):
    """Writes the note to the terminal byte for byte."""

    def __init__(self, console: Console):
        self.console = console

    def replace_content(self, text: str) -> None:
        # Bypass rich rendering: no wrapping at console width, no :emoji: codes
        output = self.console.file
        output.write(text)
        output.flush()


class ConsoleSurface(DocumentSurface):
    """Surface that always renders to stdout."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def get_active_document(self) -> Optional[EditableDocument]:
        return ConsoleDocument(self.console)
