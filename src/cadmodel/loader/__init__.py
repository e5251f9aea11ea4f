"""Declarative drawing definitions."""

from .drawing import DrawingLoader
from .entities import parse_attribute_definition, parse_entity

__all__ = ["DrawingLoader", "parse_attribute_definition", "parse_entity"]
