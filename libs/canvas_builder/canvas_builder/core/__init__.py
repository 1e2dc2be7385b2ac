"""Core module pour canvas_builder : document, factory, arbre, drag, notifications."""
from .errors import CanvasError, UnknownElementTypeError, UnknownFieldError, InvalidDragTransition
from .document import Document, parse_document, parse_elements, dump_document, dump_elements
from .page import PageData, PageStatus, SeoMetadata
from .factory import create_element
from .tree import (
    iter_elements,
    find_element,
    find_parent,
    locate,
    collect_ids,
    validate_tree,
    update_element,
    delete_element,
    set_column_count,
    extract_element,
    append_child,
    insert_before,
)
from .drag import (
    ROOT_ID,
    DragState,
    DragController,
    DragStart,
    Drop,
    DragCancel,
    DropResult,
    PaletteSource,
    NodeSource,
    PlaceholderTarget,
    ElementTarget,
    parse_drop_target,
    resolve_drop,
)
from .notifications import Notification, NotificationLevel, Notifier

__all__ = [
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
]
