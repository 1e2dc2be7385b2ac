"""
Canvas Builder v0.1 — modèle de document du canvas + moteur de mutation par drag & drop.

Usage (session d'édition):
    >>> from canvas_builder import BuilderSession, PageData, PaletteSource, PlaceholderTarget
    >>> session = BuilderSession(site_name="Acme", pages=[PageData(id="p1", site_id="s1", title="Home", slug="home")])
    >>> session.start_drag(PaletteSource(element_type="Heading"))
    >>> session.drop(PlaceholderTarget(container_id="root")).accepted
    True

Usage (rendu live):
    >>> from canvas_builder import parse_document, render_page
    >>> html = render_page(parse_document(stored_json), title="Home")
"""

# ── Éléments ────────────────────────────────────────────────────────────────
from .elements import (
    BaseElement, AnyElement, ELEMENT_TYPES, CONTAINER_TYPES,
    SectionElement, SectionStyles,
    GridElement, GridStyles,
    ColumnElement, ColumnStyles,
    HeadingElement, HeadingContent, HeadingStyles,
    TextElement, TextContent, TextStyles,
    ButtonElement, ButtonContent, ButtonStyles,
    ImageElement, ImageContent, ImageStyles,
)

# ── Core ────────────────────────────────────────────────────────────────────
from .core import (
    CanvasError, UnknownElementTypeError, UnknownFieldError, InvalidDragTransition,
    Document, parse_document, parse_elements, dump_document, dump_elements,
    PageData, PageStatus, SeoMetadata,
    create_element,
    iter_elements, find_element, find_parent, locate, collect_ids, validate_tree,
    update_element, delete_element, set_column_count,
    extract_element, append_child, insert_before,
    ROOT_ID, DragState, DragController, DragStart, Drop, DragCancel, DropResult,
    PaletteSource, NodeSource, PlaceholderTarget, ElementTarget,
    parse_drop_target, resolve_drop,
    Notification, NotificationLevel, Notifier,
)

# ── Rendu + session ─────────────────────────────────────────────────────────
from .renderer import RenderMode, RenderContext, render_elements, render_element, render_page
from .builder import BuilderSession, PageStore, SeoGenerator

__version__ = "0.1.0"

__all__ = [
    # éléments
    "BaseElement", "AnyElement", "ELEMENT_TYPES", "CONTAINER_TYPES",
    "SectionElement", "SectionStyles", "GridElement", "GridStyles",
    "ColumnElement", "ColumnStyles",
    "HeadingElement", "HeadingContent", "HeadingStyles",
    "TextElement", "TextContent", "TextStyles",
    "ButtonElement", "ButtonContent", "ButtonStyles",
    "ImageElement", "ImageContent", "ImageStyles",
    # core
    "CanvasError", "UnknownElementTypeError", "UnknownFieldError", "InvalidDragTransition",
    "Document", "parse_document", "parse_elements", "dump_document", "dump_elements",
    "PageData", "PageStatus", "SeoMetadata",
    "create_element",
    "iter_elements", "find_element", "find_parent", "locate", "collect_ids", "validate_tree",
    "update_element", "delete_element", "set_column_count",
    "extract_element", "append_child", "insert_before",
    "ROOT_ID", "DragState", "DragController", "DragStart", "Drop", "DragCancel", "DropResult",
    "PaletteSource", "NodeSource", "PlaceholderTarget", "ElementTarget",
    "parse_drop_target", "resolve_drop",
    "Notification", "NotificationLevel", "Notifier",
    # rendu + session
    "RenderMode", "RenderContext", "render_elements", "render_element", "render_page",
    "BuilderSession", "PageStore", "SeoGenerator",
]
