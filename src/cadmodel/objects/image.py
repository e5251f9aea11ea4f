"""Raster image definitions referenced by image entities."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from ..errors import InvalidArgumentError
from .base import DefinitionObject, file_stem, validate_file


class ImageDefinition(DefinitionObject):
    """Definition of a raster image file.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        horizontal_resolution: Horizontal resolution in pixels per inch
        vertical_resolution: Vertical resolution in pixels per inch
    """

    def __init__(
        self,
        file: str,
        width: int,
        height: int,
        horizontal_resolution: float = 72.0,
        vertical_resolution: float = 72.0,
        name: str | None = None,
    ) -> None:
        validate_file(file)
        super().__init__(name or file_stem(file))
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(
                f"Image size must be positive, got {width}x{height} for {file!r}"
            )
        self._file = file
        self.width = width
        self.height = height
        self.horizontal_resolution = horizontal_resolution
        self.vertical_resolution = vertical_resolution

    @classmethod
    def from_file(cls, path: str | Path, name: str | None = None) -> ImageDefinition:
        """Create a definition from an image on disk, reading its size and DPI.

        Args:
            path: Path to the image file
            name: Optional definition name. Defaults to the file stem.

        Returns:
            ImageDefinition for the file

        Raises:
            FileNotFoundError: If the image file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Image file not found: {path}")

        with Image.open(path) as img:
            width, height = img.size
            dpi = img.info.get("dpi", (72.0, 72.0))

        return cls(
            str(path),
            width,
            height,
            horizontal_resolution=float(dpi[0]),
            vertical_resolution=float(dpi[1]),
            name=name,
        )

    @property
    def file(self) -> str:
        """Get or set the image file."""
        return self._file

    @file.setter
    def file(self, value: str) -> None:
        self._file = validate_file(value)

    def __repr__(self) -> str:
        return f"ImageDefinition({self.name!r}, file={self._file!r}, {self.width}x{self.height})"
