"""YAML loader for drawing definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from PIL import UnidentifiedImageError

from ..core.document import Document
from ..errors import InvalidArgumentError
from ..objects.image import ImageDefinition
from ..objects.underlay import UNDERLAY_DEFINITIONS, UnderlayDefinition, UnderlayType
from .entities import parse_attribute_definition, parse_entity, require_list, require_mapping

logger = logging.getLogger(__name__)


class DrawingLoader:
    """Builds documents from YAML drawing definitions.

    YAML format:
        name: site_plan
        active_layout: Model          # optional, defaults to Model

        layouts:                      # extra paper space layouts
          Sheet1:
            tab_order: 2              # optional
            block: "*Paper_Space_S1"  # optional backing block name

        blocks:                       # block definitions
          door:
            attributes:
              TAG1: {prompt: "Door id", value: "D1"}
            entities:
              - {type: line, start: [0, 0, 0], end: [1, 0, 0]}

        underlays:                    # underlay definitions by name
          survey: {type: pdf, file: survey.pdf, page: "2"}

        images:                       # image definitions by name
          logo: {file: logo.png}                       # size read from the file
          photo: {file: photo.jpg, width: 640, height: 480}

        entities:                     # entities per layout, in drawing order
          Model:
            - {type: line, start: [0, 0, 0], end: [10, 0, 0], layer: walls}
            - {type: underlay, definition: survey}

    Image files without an explicit size are resolved relative to the YAML
    file's directory (or the loader's base directory for strings).
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        """Initialize the loader.

        Args:
            base_dir: Directory relative image paths are resolved against
                when loading from a string. Defaults to the working directory.
        """
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def load(self, path: str | Path) -> Document:
        """Load a drawing definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Document with every layout, block, definition and entity added

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidArgumentError: If the definition is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Drawing definition not found: {path}")
        with open(path) as f:
            data = self._parse_yaml(f)

        return self._build_document(data, path.parent)

    def load_string(self, yaml_string: str) -> Document:
        """Load a drawing definition from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            Document built from the definition

        Raises:
            InvalidArgumentError: If the definition is malformed
        """
        data = self._parse_yaml(yaml_string)
        return self._build_document(data, self._base_dir)

    def _parse_yaml(self, stream: Any) -> Any:
        try:
            return yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise InvalidArgumentError(f"Invalid drawing definition YAML: {e}") from e

    def _build_document(self, data: dict[str, Any] | None, base_dir: Path) -> Document:
        """Build a document from parsed YAML data."""
        if not isinstance(data, dict):
            raise InvalidArgumentError("A drawing definition must be a mapping.")

        document = Document(data.get("name", "drawing"))

        for layout_name, layout_def in require_mapping(data.get("layouts"), "layouts section").items():
            layout_def = require_mapping(layout_def, f"layout '{layout_name}'")
            document.add_layout(
                layout_name,
                block_name=layout_def.get("block"),
                tab_order=layout_def.get("tab_order"),
            )

        for definition_name, definition_def in require_mapping(data.get("underlays"), "underlays section").items():
            document.add_underlay_definition(self._parse_underlay(definition_name, definition_def))

        for definition_name, definition_def in require_mapping(data.get("images"), "images section").items():
            document.add_image_definition(self._parse_image(definition_name, definition_def, base_dir))

        # Blocks first so inserts in layouts can refer to them
        for block_name, block_def in require_mapping(data.get("blocks"), "blocks section").items():
            block_def = require_mapping(block_def, f"block '{block_name}'")
            block = document.add_block(block_name)
            attribute_defs = require_mapping(block_def.get("attributes"), f"attributes of block '{block_name}'")
            for tag, attribute_def in attribute_defs.items():
                block.add_attribute_definition(parse_attribute_definition(tag, attribute_def))
            for entity_def in require_list(block_def.get("entities"), f"entities of block '{block_name}'"):
                block.add_entity(document, parse_entity(entity_def, document))

        entity_count = 0
        for layout_name, entity_defs in require_mapping(data.get("entities"), "entities section").items():
            document.entities.active_layout = layout_name
            entity_defs = require_list(entity_defs, f"entities of layout '{layout_name}'")
            entities = [parse_entity(entity_def, document) for entity_def in entity_defs]
            document.entities.add_many(entities)
            entity_count += len(entities)

        document.entities.active_layout = data.get("active_layout", "Model")

        logger.info(
            "Loaded drawing %s: %d layouts, %d blocks, %d layout entities",
            document.name,
            len(document.layouts),
            len(document.blocks),
            entity_count,
        )
        return document

    def _parse_underlay(self, name: str, data: dict[str, Any]) -> UnderlayDefinition:
        """Create an underlay definition of the kind named by ``type``."""
        params = dict(require_mapping(data, f"underlay definition '{name}'"))
        kind_name = params.pop("type", None)
        if kind_name is None:
            raise InvalidArgumentError(f"Underlay definition '{name}' has no type.")
        try:
            kind = UnderlayType(str(kind_name).lower())
        except ValueError:
            raise InvalidArgumentError(f"Unknown underlay type: {kind_name}") from None

        cls = UNDERLAY_DEFINITIONS[kind]
        try:
            return cls(name=name, **params)
        except InvalidArgumentError:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Invalid underlay definition '{name}': {e}") from e

    def _parse_image(self, name: str, data: dict[str, Any], base_dir: Path) -> ImageDefinition:
        """Create an image definition, reading the size from disk when not given."""
        params = dict(require_mapping(data, f"image definition '{name}'"))
        file = params.get("file")
        if "width" in params or "height" in params:
            try:
                return ImageDefinition(name=name, **params)
            except InvalidArgumentError:
                raise
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(f"Invalid image definition '{name}': {e}") from e

        if not file:
            raise InvalidArgumentError(f"Image definition '{name}' has no file.")
        path = Path(str(file))
        if not path.is_absolute():
            path = base_dir / path
        try:
            return ImageDefinition.from_file(path, name=name)
        except UnidentifiedImageError as e:
            raise InvalidArgumentError(f"Image definition '{name}': {path} is not a readable image") from e
