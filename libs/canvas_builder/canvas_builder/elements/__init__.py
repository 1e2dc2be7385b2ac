"""
Éléments du canvas — exports publics + union discriminée AnyElement.
"""
from .base import BaseElement, ElementContent, ElementStyles, ContainerContent, new_element_id
from .section import SectionStyles
from .grid import GridStyles
from .column import ColumnStyles
from .heading import HeadingContent, HeadingStyles, HeadingLevel
from .text import TextContent, TextStyles
from .button import ButtonContent, ButtonStyles
from .image import ImageContent, ImageStyles
from .nodes import (
    SectionElement, GridElement, ColumnElement,
    HeadingElement, TextElement, ButtonElement, ImageElement,
    AnyElement, ELEMENT_TYPES, CONTAINER_TYPES,
)

__all__ = [
    # Base
    "BaseElement", "ElementContent", "ElementStyles", "ContainerContent", "new_element_id",
    # Conteneurs
    "SectionElement", "SectionStyles",
    "GridElement", "GridStyles",
    "ColumnElement", "ColumnStyles",
    # Feuilles
    "HeadingElement", "HeadingContent", "HeadingStyles", "HeadingLevel",
    "TextElement", "TextContent", "TextStyles",
    "ButtonElement", "ButtonContent", "ButtonStyles",
    "ImageElement", "ImageContent", "ImageStyles",
    # Union + registry
    "AnyElement", "ELEMENT_TYPES", "CONTAINER_TYPES",
]
