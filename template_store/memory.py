"""In-memory file services used in place of the real template file system."""

from __future__ import annotations

import logging
import os

from . import metrics
from .config import check_template_extension, get_settings
from .errors import DirectoryNotFoundError, DuplicateKeyError, TemplateFileNotFoundError
from .files import InputFile, TemplateFileInfo

log = logging.getLogger(__name__)


class InMemoryFileService:
    """Directory-keyed store of virtual files.

    Files live in a two-level mapping of directory to file name to contents.
    Directories are created on first registration and registering a name
    twice overwrites the earlier contents.
    """

    def __init__(self) -> None:
        self._files: dict[str, dict[str, str]] = {}

    def register_files(self, *files: InputFile) -> list[str]:
        """Store ``files`` for later retrieval and return their joined paths."""
        paths: list[str] = []
        for file in files:
            files_map = self._files.setdefault(file.directory, {})
            files_map[file.file] = file.contents
            paths.append(os.path.join(file.directory, file.file))
            log.debug(
                "file_registered",
                extra={"directory": file.directory, "file_name": file.file},
            )
        metrics.files_registered_total.inc(len(paths))
        return paths

    def list_file_names(self, directory: str) -> list[str]:
        metrics.lookups_total.inc()
        files_map = self._files.get(directory)
        if files_map is None:
            metrics.lookup_misses_total.inc()
            err = DirectoryNotFoundError(directory)
            log.warning(
                "directory_not_found",
                extra={"directory": directory, "error_category": err.category.value},
            )
            raise err
        return list(files_map)

    def get_file_contents(self, directory: str, file_name: str) -> str:
        metrics.lookups_total.inc()
        try:
            return self._files[directory][file_name]
        except KeyError as exc:
            metrics.lookup_misses_total.inc()
            err = TemplateFileNotFoundError(directory, file_name)
            log.warning(
                "file_not_found",
                extra={
                    "directory": directory,
                    "file_name": file_name,
                    "error_category": err.category.value,
                },
            )
            raise err from exc

    def directories(self) -> list[str]:
        return list(self._files)

    def clear(self) -> None:
        self._files.clear()


class InMemoryTemplateFileService(InMemoryFileService):
    """Serves template files and partial descriptions from memory.

    ``template_extension`` defaults to the configured extension (``.hbs``).
    An explicit extension must start with a dot, otherwise ``ValueError``
    is raised.
    """

    def __init__(self, template_extension: str | None = None) -> None:
        super().__init__()
        if template_extension is None:
            template_extension = get_settings().template_extension
        self.template_extension = check_template_extension(template_extension)

    def describe_partial_templates(
        self, result: dict[str, TemplateFileInfo], directory: str
    ) -> dict[str, TemplateFileInfo]:
        """Add a :class:`TemplateFileInfo` for every file in ``directory``.

        Entries are only ever added: if ``result`` already holds one of the
        names a :class:`DuplicateKeyError` is raised and ``result`` is left
        unchanged. The same mapping is returned so calls can be chained across
        directories.
        """
        names = self.list_file_names(directory)
        for name in names:
            if name in result:
                err = DuplicateKeyError(name)
                log.warning(
                    "duplicate_partial",
                    extra={
                        "directory": directory,
                        "file_name": name,
                        "error_category": err.category.value,
                    },
                )
                raise err
        for name in names:
            result[name] = TemplateFileInfo(
                relative_directory=directory,
                file_name=name + self.template_extension,
            )
        log.debug("partials_described", extra={"directory": directory, "count": len(names)})
        return result

    def get_template_file_contents(
        self, directory: str, file_name: str, alt_directory: str | None = None
    ) -> str:
        # alt_directory only matters for the on-disk service
        return self.get_file_contents(directory, file_name)
