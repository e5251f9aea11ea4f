"""Shared behaviour for objects that reference external files."""

from __future__ import annotations

from pathlib import PureWindowsPath

from ..errors import InvalidArgumentError


# Characters a file path may not carry
INVALID_PATH_CHARS: frozenset[str] = frozenset('"<>|' + "".join(chr(i) for i in range(32)))


def validate_file(file: str | None) -> str:
    """Check a file path is usable as an external reference.

    Only the first character is tested against INVALID_PATH_CHARS.

    Args:
        file: File name with full or relative path

    Returns:
        The unchanged path

    Raises:
        InvalidArgumentError: If the path is empty or starts with an
            invalid character
    """
    if not file:
        raise InvalidArgumentError("The file path cannot be empty.")

    if file[0] in INVALID_PATH_CHARS:
        raise InvalidArgumentError(f"File path contains invalid characters: {file!r}")

    return file


def file_extension(file: str) -> str:
    """Return the extension of a path, including the dot ('' if none).

    The extension starts at the last dot of the final path segment, so a
    name made only of an extension (``plans/.pdf``) still has one. A
    trailing dot yields no extension. Both slash styles and the drive
    colon are treated as separators.
    """
    name = file[max(file.rfind(sep) for sep in "\\/:") + 1:]
    index = name.rfind(".")
    if index < 0 or index == len(name) - 1:
        return ""
    return name[index:]


def file_stem(file: str) -> str:
    """Return the file name of a path without its extension."""
    return PureWindowsPath(file).stem


class DefinitionObject:
    """A named, document-level object referenced by entities.

    Attributes:
        name: Unique name within its document table
        handle: Identifier assigned when the object is added to a document
        references: Handles of the entities that use this definition
    """

    def __init__(self, name: str) -> None:
        if not name:
            raise InvalidArgumentError("The definition name cannot be empty.")
        self.name = name
        self.handle: str | None = None
        self.references: set[str] = set()

    @property
    def is_referenced(self) -> bool:
        """Whether any attached entity uses this definition."""
        return bool(self.references)
