"""File and template-file service contracts."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Protocol


@dataclass
class InputFile:
    """A virtual file to register with a file service."""

    directory: str
    file: str
    contents: str


@dataclass(frozen=True)
class TemplateFileInfo:
    """Location of a partial template relative to the templates root."""

    relative_directory: str
    file_name: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class FileService(Protocol):
    def list_file_names(self, directory: str) -> list[str]:  # noqa: D401
        """Return the names of all files in ``directory``."""

    def get_file_contents(self, directory: str, file_name: str) -> str:  # noqa: D401
        """Return the contents of ``file_name`` in ``directory``."""


class TemplateFileService(FileService, Protocol):
    def get_template_file_contents(
        self, directory: str, file_name: str, alt_directory: str | None = None
    ) -> str:  # noqa: D401
        """Return the contents of a template file."""

    def describe_partial_templates(
        self, result: dict[str, TemplateFileInfo], directory: str
    ) -> dict[str, TemplateFileInfo]:  # noqa: D401
        """Add every partial template in ``directory`` to ``result``."""
