"""Underlay definitions: external DGN, DWF and PDF files shown under a drawing."""

from __future__ import annotations

from enum import Enum

from ..errors import InvalidArgumentError
from .base import DefinitionObject, file_extension, file_stem, validate_file


class UnderlayType(Enum):
    """Kinds of file an underlay can reference."""

    DGN = "dgn"
    DWF = "dwf"
    PDF = "pdf"


class ObjectCode(Enum):
    """Object codes used when definitions are written out."""

    DGN_DEFINITION = "DGNDEFINITION"
    DWF_DEFINITION = "DWFDEFINITION"
    PDF_DEFINITION = "PDFDEFINITION"


# Mapping from underlay kind to the file extension it requires
UNDERLAY_EXTENSIONS: dict[UnderlayType, str] = {
    UnderlayType.DGN: ".DGN",
    UnderlayType.DWF: ".DWF",
    UnderlayType.PDF: ".PDF",
}

# Mapping from underlay kind to its object code
UNDERLAY_CODES: dict[UnderlayType, ObjectCode] = {
    UnderlayType.DGN: ObjectCode.DGN_DEFINITION,
    UnderlayType.DWF: ObjectCode.DWF_DEFINITION,
    UnderlayType.PDF: ObjectCode.PDF_DEFINITION,
}


class UnderlayDefinition(DefinitionObject):
    """Definition of an underlay file.

    The kind is fixed at construction and the file extension must match it
    whenever the file is set, e.g. a PDF definition always points at a
    ``.pdf`` file (the comparison ignores case).

    Example:
        definition = UnderlayDefinition("survey", "plans/survey.pdf", UnderlayType.PDF)
        definition.file = "plans/survey_rev2.PDF"   # fine
        definition.file = "plans/survey.dwf"        # InvalidArgumentError
    """

    def __init__(self, name: str, file: str, kind: UnderlayType | str) -> None:
        """Create a definition.

        Args:
            name: Underlay definition name
            file: Underlay file name with full or relative path
            kind: Underlay kind (enum or its string value)

        Raises:
            InvalidArgumentError: If the file is empty, starts with an
                invalid character, or its extension does not match the kind
        """
        super().__init__(name)
        if isinstance(kind, str):
            try:
                kind = UnderlayType(kind.lower())
            except ValueError:
                raise InvalidArgumentError(f"Unknown underlay type: {kind}") from None
        elif not isinstance(kind, UnderlayType):
            raise InvalidArgumentError(f"Unknown underlay type: {kind!r}")

        self._kind = kind
        self._check_extension(validate_file(file))
        self._file = file
        self.code_name = UNDERLAY_CODES[kind]

    @property
    def kind(self) -> UnderlayType:
        """Get the underlay kind."""
        return self._kind

    @property
    def file(self) -> str:
        """Get or set the underlay file.

        The file extension must match the underlay kind.
        """
        return self._file

    @file.setter
    def file(self, value: str) -> None:
        self._check_extension(validate_file(value))
        self.code_name = UNDERLAY_CODES[self._kind]
        self._file = value

    @property
    def expected_extension(self) -> str:
        """The extension (upper case, with dot) files of this kind carry."""
        return UNDERLAY_EXTENSIONS[self._kind]

    def _check_extension(self, file: str) -> None:
        ext = file_extension(file)
        expected = UNDERLAY_EXTENSIONS[self._kind]
        if ext.upper() != expected:
            raise InvalidArgumentError(
                f"The underlay type {self._kind.name} and the file extension do not match: "
                f"expected '{expected}', got '{ext or '<none>'}' in {file!r}"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, file={self._file!r}, kind={self._kind.name})"


class UnderlayPdfDefinition(UnderlayDefinition):
    """PDF underlay definition.

    Attributes:
        page: Page of the PDF file shown by the underlay
    """

    def __init__(self, file: str, name: str | None = None, page: str = "1") -> None:
        super().__init__(name or file_stem(validate_file(file)), file, UnderlayType.PDF)
        self.page = page


class UnderlayDwfDefinition(UnderlayDefinition):
    """DWF underlay definition."""

    def __init__(self, file: str, name: str | None = None) -> None:
        super().__init__(name or file_stem(validate_file(file)), file, UnderlayType.DWF)


class UnderlayDgnDefinition(UnderlayDefinition):
    """DGN underlay definition.

    Attributes:
        layout: Model or layout of the DGN file shown by the underlay
    """

    def __init__(self, file: str, name: str | None = None, layout: str = "Model") -> None:
        super().__init__(name or file_stem(validate_file(file)), file, UnderlayType.DGN)
        self.layout = layout


# Registry of concrete definition classes by kind
UNDERLAY_DEFINITIONS: dict[UnderlayType, type[UnderlayDefinition]] = {
    UnderlayType.DGN: UnderlayDgnDefinition,
    UnderlayType.DWF: UnderlayDwfDefinition,
    UnderlayType.PDF: UnderlayPdfDefinition,
}
