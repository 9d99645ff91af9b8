"""In-memory template file service.

Stores virtual template files keyed by directory and name so that a
Handlebars-style code generator can be exercised without touching the disk.
Nothing here performs I/O on import.
"""

from .errors import (
    DirectoryNotFoundError,
    DuplicateKeyError,
    TemplateFileNotFoundError,
    TemplateStoreError,
)
from .files import FileService, InputFile, TemplateFileInfo, TemplateFileService
from .memory import InMemoryFileService, InMemoryTemplateFileService

__all__ = [
    "__version__",
    "DirectoryNotFoundError",
    "DuplicateKeyError",
    "FileService",
    "InMemoryFileService",
    "InMemoryTemplateFileService",
    "InputFile",
    "TemplateFileInfo",
    "TemplateFileNotFoundError",
    "TemplateFileService",
    "TemplateStoreError",
]

__version__ = "0.1.0"
