"""
Les 7 variantes d'éléments + union discriminée `AnyElement`.

Section, Grid, Column sont des conteneurs (champ `children`) ;
Heading, Text, Button, Image sont des feuilles (pas de `children`).
Les variantes récursives sont regroupées ici pour résoudre `AnyElement`.
"""
from typing import Annotated, ClassVar, Dict, List, Literal, Type, Union

from pydantic import Field

from .base import BaseElement, ContainerContent
from .section import SectionStyles
from .grid import GridStyles
from .column import ColumnStyles
from .heading import HeadingContent, HeadingStyles
from .text import TextContent, TextStyles
from .button import ButtonContent, ButtonStyles
from .image import ImageContent, ImageStyles


# ── Conteneurs ──────────────────────────────────────────────────────────────

class SectionElement(BaseElement):
    type: Literal["Section"] = "Section"
    content: ContainerContent = ContainerContent()
    styles: SectionStyles = SectionStyles()
    children: List["AnyElement"] = Field(default_factory=list)

    is_container: ClassVar[bool] = True


class GridElement(BaseElement):
    type: Literal["Grid"] = "Grid"
    content: ContainerContent = ContainerContent()
    styles: GridStyles = GridStyles()
    children: List["AnyElement"] = Field(default_factory=list)

    is_container: ClassVar[bool] = True


class ColumnElement(BaseElement):
    type: Literal["Column"] = "Column"
    content: ContainerContent = ContainerContent()
    styles: ColumnStyles = ColumnStyles()
    children: List["AnyElement"] = Field(default_factory=list)

    is_container: ClassVar[bool] = True


# ── Feuilles ────────────────────────────────────────────────────────────────

class HeadingElement(BaseElement):
    type: Literal["Heading"] = "Heading"
    content: HeadingContent = HeadingContent()
    styles: HeadingStyles = HeadingStyles()

    @property
    def badge(self) -> str:
        return f"HEADING ({self.content.level.upper()})"


class TextElement(BaseElement):
    type: Literal["Text"] = "Text"
    content: TextContent = TextContent()
    styles: TextStyles = TextStyles()


class ButtonElement(BaseElement):
    type: Literal["Button"] = "Button"
    content: ButtonContent = ButtonContent()
    styles: ButtonStyles = ButtonStyles()


class ImageElement(BaseElement):
    type: Literal["Image"] = "Image"
    content: ImageContent = ImageContent()
    styles: ImageStyles = ImageStyles()


# Union discriminée par `type`
AnyElement = Annotated[
    Union[
        SectionElement,
        GridElement,
        ColumnElement,
        HeadingElement,
        TextElement,
        ButtonElement,
        ImageElement,
    ],
    Field(discriminator="type"),
]

SectionElement.model_rebuild()
GridElement.model_rebuild()
ColumnElement.model_rebuild()

ELEMENT_TYPES: Dict[str, Type[BaseElement]] = {
    "Section": SectionElement,
    "Grid":    GridElement,
    "Column":  ColumnElement,
    "Heading": HeadingElement,
    "Text":    TextElement,
    "Button":  ButtonElement,
    "Image":   ImageElement,
}

CONTAINER_TYPES = frozenset(name for name, cls in ELEMENT_TYPES.items() if cls.is_container)
