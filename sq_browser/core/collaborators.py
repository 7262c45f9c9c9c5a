from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class AddressBarSync(ABC):
    """
    Mirrors the encoded filter state into the page address.
    Implementations must replace the current history entry, never push.
    """

    @abstractmethod
    def replace(self, search: str) -> None:
        pass


class FileDownloader(ABC):
    """
    One-shot client-side download of generated content.
    """

    @abstractmethod
    def download(self, filename: str, content: bytes, mime_type: str) -> None:
        pass


class ConfirmationPrompt(ABC):
    """
    Asks the user a yes/no question before a destructive action.
    """

    @abstractmethod
    def confirm(self, message: str) -> bool:
        pass


class RecordingAddressBar(AddressBarSync):
    """
    Keeps the last replaced search string; the Dash layer reads it back
    and hands it to a clientside history.replaceState.
    """

    def __init__(self) -> None:
        self.current: Optional[str] = None
        self.replacements = 0

    def replace(self, search: str) -> None:
        self.current = search
        self.replacements += 1


class BufferedDownloader(FileDownloader):
    """
    Captures the generated file so a Dash callback can return it
    to dcc.Download.
    """

    def __init__(self) -> None:
        self.files: List[Tuple[str, bytes, str]] = []

    def download(self, filename: str, content: bytes, mime_type: str) -> None:
        self.files.append((filename, content, mime_type))

    @property
    def last(self) -> Optional[Tuple[str, bytes, str]]:
        return self.files[-1] if self.files else None


class PreConfirmed(ConfirmationPrompt):
    """
    Used when the UI already gated the action behind dcc.ConfirmDialog.
    """

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.asked: List[str] = []

    def confirm(self, message: str) -> bool:
        self.asked.append(message)
        return self.answer
