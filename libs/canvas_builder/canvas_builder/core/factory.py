"""
Element Factory — construit un nouvel élément typé avec ses valeurs par défaut.
Chaque appel génère un id neuf ; la Grid naît avec 2 colonnes vides.
"""
import logging
from typing import Callable, Dict

from ..elements import (
    AnyElement,
    SectionElement, SectionStyles,
    GridElement, GridStyles,
    ColumnElement, ColumnStyles,
    HeadingElement, HeadingContent, HeadingStyles,
    TextElement, TextContent, TextStyles,
    ButtonElement, ButtonContent, ButtonStyles,
    ImageElement, ImageContent, ImageStyles,
)
from .errors import UnknownElementTypeError

log = logging.getLogger(__name__)

PLACEHOLDER_IMAGE_URL = "https://images.unsplash.com/photo-1618005182384-a83a8bd57fbe?q=80&w=2564"
PLACEHOLDER_TEXT = "Start typing your content here."
DEFAULT_GRID_COLUMNS = 2


def _section() -> SectionElement:
    return SectionElement(styles=SectionStyles(padding="4rem 2rem", background_color="#ffffff"))


def _column() -> ColumnElement:
    return ColumnElement(styles=ColumnStyles(padding="1rem"))


def _grid() -> GridElement:
    return GridElement(
        styles=GridStyles(gap="1.5rem", padding="1rem", align_items="start"),
        children=[_column() for _ in range(DEFAULT_GRID_COLUMNS)],
    )


def _heading() -> HeadingElement:
    return HeadingElement(
        content=HeadingContent(text="New Heading", level="h2"),
        styles=HeadingStyles(font_size="2.25rem", font_weight="700", text_align="left", color="#111827"),
    )


def _text() -> TextElement:
    return TextElement(
        content=TextContent(text=PLACEHOLDER_TEXT),
        styles=TextStyles(font_size="1rem", line_height="1.6", text_align="left", color="#4b5563"),
    )


def _button() -> ButtonElement:
    return ButtonElement(
        content=ButtonContent(text="Click Me", url="#"),
        styles=ButtonStyles(
            background_color="#2563eb",
            color="#ffffff",
            padding="0.75rem 1.5rem",
            border_radius="0.5rem",
            text_align="center",
        ),
    )


def _image() -> ImageElement:
    return ImageElement(
        content=ImageContent(src=PLACEHOLDER_IMAGE_URL, alt="Placeholder Image"),
        styles=ImageStyles(width="100%", border_radius="0.5rem"),
    )


# ── Registry des fabriques ──────────────────────────────────────────────────

_FACTORIES: Dict[str, Callable[[], AnyElement]] = {
    "Section": _section,
    "Grid":    _grid,
    "Column":  _column,
    "Heading": _heading,
    "Text":    _text,
    "Button":  _button,
    "Image":   _image,
}


def create_element(element_type: str) -> AnyElement:
    """Instancie un élément `element_type` avec un id neuf et ses défauts."""
    factory = _FACTORIES.get(element_type)
    if factory is None:
        raise UnknownElementTypeError(f"Élément inconnu : {element_type!r}. Registry : {list(_FACTORIES)}")
    element = factory()
    log.debug("Élément créé : %s %s", element.type, element.id)
    return element
