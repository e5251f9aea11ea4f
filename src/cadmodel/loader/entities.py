"""Parse entity records from drawing definition data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..entities import ENTITY_CLASSES, AttributeDefinition, EntityObject, EntityType
from ..errors import InvalidArgumentError

if TYPE_CHECKING:
    from ..core.document import Document


def parse_entity(data: dict[str, Any], document: Document) -> EntityObject:
    """Build an unattached entity from a definition record.

    The ``type`` key selects the entity class; every other key is passed to
    its constructor. Underlays and images name their definition, which
    must already be registered in the document.

    Args:
        data: Dictionary with a ``type`` key and entity fields
        document: Document whose definition tables resolve references

    Returns:
        New entity, not yet added to the document

    Raises:
        InvalidArgumentError: If the record is not a mapping, the type is
            unknown, a field is not valid for the type, or a referenced
            definition does not exist
    """
    params = dict(require_mapping(data, "entity definition"))
    type_name = params.pop("type", None)
    if type_name is None:
        raise InvalidArgumentError(f"Entity definition has no type: {data}")
    try:
        entity_type = EntityType(str(type_name).lower())
    except ValueError:
        raise InvalidArgumentError(f"Unknown entity type: {type_name}") from None

    if entity_type is EntityType.UNDERLAY:
        params["definition"] = _lookup(document.underlay_definitions, params.get("definition"))
    elif entity_type is EntityType.IMAGE:
        params["definition"] = _lookup(document.image_definitions, params.get("definition"))

    cls = ENTITY_CLASSES[entity_type]
    try:
        return cls(**params)
    except InvalidArgumentError:
        raise
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid {entity_type.value} definition {data}: {e}") from e


def parse_attribute_definition(tag: str, data: dict[str, Any] | None) -> AttributeDefinition:
    """Parse an attribute definition record.

    Args:
        tag: Attribute tag
        data: Dictionary with prompt, value, position, height, is_constant fields
    """
    params = require_mapping(data, f"attribute definition '{tag}'")
    try:
        return AttributeDefinition(tag=tag, **params)
    except InvalidArgumentError:
        raise
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid attribute definition '{tag}': {e}") from e


def require_mapping(value: Any, what: str) -> dict[str, Any]:
    """Return a definition section as a dict (empty for a missing section).

    Raises:
        InvalidArgumentError: If the value is neither empty nor a mapping
    """
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidArgumentError(f"The {what} must be a mapping, got {type(value).__name__}: {value!r}")
    return value


def require_list(value: Any, what: str) -> list[Any]:
    """Return a definition sequence as a list (empty for a missing one)."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidArgumentError(f"The {what} must be a list, got {type(value).__name__}: {value!r}")
    return value


def _lookup(table, name: str | None):
    if name is None:
        raise InvalidArgumentError(f"A {table.table} name is required.")
    if not isinstance(name, str):
        raise InvalidArgumentError(f"A {table.table} name must be a string, got {name!r}.")
    if name not in table:
        raise InvalidArgumentError(f"Unknown {table.table} '{name}'.")
    return table[name]
