"""
Capability interfaces for the collaborators around the extraction pipeline.
"""

from abc import ABC, abstractmethod
from typing import Optional


class EditableDocument(ABC):
    """A document whose content can be replaced."""

    @abstractmethod
    def replace_content(self, text: str) -> None:
        """Replace the entire document content with text."""
        pass


class DocumentSurface(ABC):
    """The place rendered notes are delivered to."""

    @abstractmethod
    def get_active_document(self) -> Optional[EditableDocument]:
        """Return the currently active document, or None if there is none."""
        pass


class Notifier(ABC):
    """Shows short user-visible messages."""

    @abstractmethod
    def notify(self, message: str, success: bool = True) -> None:
        pass
