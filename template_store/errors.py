from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification for error logging."""

    LOOKUP = "lookup"
    CONFLICT = "conflict"


class TemplateStoreError(Exception):
    """Base class for failures raised by the template store."""

    category: ErrorCategory = ErrorCategory.LOOKUP


class DirectoryNotFoundError(TemplateStoreError, FileNotFoundError):
    """A directory key was never registered."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Could not find directory {directory}")
        self.directory = directory


class TemplateFileNotFoundError(TemplateStoreError, FileNotFoundError):
    """The directory or the file name within it is absent."""

    def __init__(self, directory: str, file_name: str) -> None:
        super().__init__(f"Could not find file {file_name} in directory {directory}")
        self.directory = directory
        self.file_name = file_name


class DuplicateKeyError(TemplateStoreError, KeyError):
    """A result mapping already holds the key being added."""

    category = ErrorCategory.CONFLICT

    def __init__(self, key: str) -> None:
        super().__init__(f"An item with the same key has already been added: {key}")
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])
