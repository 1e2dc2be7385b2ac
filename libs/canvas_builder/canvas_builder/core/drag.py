"""
Drag Interaction Controller — machine à états du drag & drop.

    IDLE ──DragStart──▶ DRAGGING ──Drop──▶ RESOLVING ──▶ IDLE
                           └──DragCancel──────────────▶ IDLE

Au drop : extraction du nœud glissé (neuf ou existant) → résolution de la
cible → validation des contraintes de placement → commit ou rejet.
Un rejet renvoie l'arbre d'avant le drop (extraction annulée) et une raison.
"""
import logging
from enum import Enum
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict

from ..elements import AnyElement
from .errors import InvalidDragTransition, UnknownElementTypeError
from .factory import create_element
from .tree import append_child, extract_element, find_element, insert_before, locate

log = logging.getLogger(__name__)

ROOT_ID = "root"
PLACEHOLDER_PREFIX = "placeholder-"

MSG_MISSED_DROP_ZONE  = "Missed the drop zone. Drag directly over a highlighted area."
MSG_SECTION_ROOT_ONLY = "Sections must remain at the root level."
MSG_GRID_COLUMNS_ONLY = "Only columns can be added directly inside Grids."
MSG_GRID_NEXT_TO_GRID = "You cannot place a Grid next to another Grid inside a column."
MSG_TARGET_NOT_FOUND  = "The drop target no longer exists."
MSG_SOURCE_NOT_FOUND  = "The dragged element no longer exists."


class DragState(str, Enum):
    IDLE      = "idle"
    DRAGGING  = "dragging"
    RESOLVING = "resolving"


# ── Sources & cibles ────────────────────────────────────────────────────────

class PaletteSource(BaseModel):
    """Entrée de la palette : seul le type est connu, le nœud n'existe pas encore."""
    model_config = ConfigDict(frozen=True)
    element_type: str


class NodeSource(BaseModel):
    """Nœud existant du canvas."""
    model_config = ConfigDict(frozen=True)
    element_id: str


DragSource = Union[PaletteSource, NodeSource]


class PlaceholderTarget(BaseModel):
    """Zone « drop here » d'un conteneur (ou de la racine) : ajout en fin."""
    model_config = ConfigDict(frozen=True)
    container_id: str

    @property
    def is_root(self) -> bool:
        return self.container_id == ROOT_ID


class ElementTarget(BaseModel):
    """Élément existant : insertion juste avant lui."""
    model_config = ConfigDict(frozen=True)
    element_id: str


DropTarget = Union[PlaceholderTarget, ElementTarget]


def parse_drop_target(raw_id: Optional[str]) -> Optional[DropTarget]:
    """Id de zone du canvas (`placeholder-<id>` ou id d'élément) → cible typée."""
    if not raw_id:
        return None
    if raw_id.startswith(PLACEHOLDER_PREFIX):
        return PlaceholderTarget(container_id=raw_id[len(PLACEHOLDER_PREFIX):])
    return ElementTarget(element_id=raw_id)


# ── Événements ──────────────────────────────────────────────────────────────

class DragStart(BaseModel):
    model_config = ConfigDict(frozen=True)
    source: DragSource


class Drop(BaseModel):
    model_config = ConfigDict(frozen=True)
    target: Optional[DropTarget] = None


class DragCancel(BaseModel):
    model_config = ConfigDict(frozen=True)


DragEvent = Union[DragStart, Drop, DragCancel]


class DropResult(BaseModel):
    """Issue d'un drop : nouvel arbre si accepté, arbre d'origine + raison sinon."""
    model_config = ConfigDict(frozen=True)

    accepted: bool
    elements: List[AnyElement]
    element_id: Optional[str] = None
    is_new: bool = False
    reason: Optional[str] = None


# ── Algorithme de drop ──────────────────────────────────────────────────────

def _placement_error(
    node: AnyElement,
    parent: Optional[AnyElement],
    siblings: Sequence[AnyElement],
    index: int,
) -> Optional[str]:
    """Contraintes de placement de `node` à la position `index` de `siblings`."""
    if parent is None:
        return None
    if node.type == "Section":
        return MSG_SECTION_ROOT_ONLY
    if parent.type == "Grid" and node.type != "Column":
        return MSG_GRID_COLUMNS_ONLY
    if node.type == "Grid":
        before = siblings[index - 1] if index > 0 else None
        after  = siblings[index] if index < len(siblings) else None
        if any(n is not None and n.type == "Grid" for n in (before, after)):
            return MSG_GRID_NEXT_TO_GRID
    return None


def resolve_drop(
    elements: Sequence[AnyElement],
    source: DragSource,
    target: Optional[DropTarget],
) -> DropResult:
    """Réconcilie un geste de drag & drop en édition structurelle de l'arbre."""
    original = list(elements)

    def _reject(reason: str) -> DropResult:
        log.warning("Drop rejeté (%s → %s) : %s", source, target, reason)
        return DropResult(accepted=False, elements=original, reason=reason)

    if target is None:
        return _reject(MSG_MISSED_DROP_ZONE)

    # 1. Extraction du nœud glissé
    if isinstance(source, PaletteSource):
        try:
            node = create_element(source.element_type)
        except UnknownElementTypeError as e:
            return _reject(str(e))
        tree = original
        is_new = True
    else:
        node, tree = extract_element(original, source.element_id)
        if node is None:
            return _reject(MSG_SOURCE_NOT_FOUND)
        is_new = False

    # 2. Résolution de la cible + 3. contraintes
    if isinstance(target, PlaceholderTarget):
        if target.is_root:
            updated = [*tree, node]
        else:
            container = find_element(tree, target.container_id)
            if container is None:
                return _reject(MSG_TARGET_NOT_FOUND)
            if not container.is_container:
                return _reject(f"{container.type} elements cannot contain other elements.")
            reason = _placement_error(node, container, container.children, len(container.children))
            if reason:
                return _reject(reason)
            updated = append_child(tree, container.id, node)
    else:
        found = locate(tree, target.element_id)
        if found is None:
            return _reject(MSG_TARGET_NOT_FOUND)
        parent, index = found
        siblings = tree if parent is None else parent.children
        reason = _placement_error(node, parent, siblings, index)
        if reason:
            return _reject(reason)
        updated = insert_before(tree, target.element_id, node)

    log.info("Drop accepté : %s %s (%s)", node.type, node.id, "nouveau" if is_new else "déplacé")
    return DropResult(accepted=True, elements=updated, element_id=node.id, is_new=is_new)


# ── Machine à états ─────────────────────────────────────────────────────────

class DragController:
    """
    Une seule session de drag à la fois ; état transitoire, remis à zéro
    après chaque drop ou annulation quelle qu'en soit l'issue.

    Usage:
        >>> ctrl = DragController()
        >>> ctrl.dispatch(DragStart(source=PaletteSource(element_type="Heading")))
        >>> result = ctrl.dispatch(Drop(target=PlaceholderTarget(container_id="root")), [])
        >>> result.accepted
        True
    """

    def __init__(self):
        self.state = DragState.IDLE
        self.source: Optional[DragSource] = None

    def dispatch(self, event: DragEvent, elements: Sequence[AnyElement] = ()) -> Optional[DropResult]:
        """Fonction de transition unique. Retourne un DropResult sur Drop, None sinon."""
        if isinstance(event, DragStart):
            if self.state is not DragState.IDLE:
                raise InvalidDragTransition(f"DragStart reçu en état {self.state.value}")
            self.source = event.source
            self.state = DragState.DRAGGING
            log.debug("Drag démarré : %s", event.source)
            return None

        if isinstance(event, DragCancel):
            if self.state is not DragState.DRAGGING:
                raise InvalidDragTransition(f"DragCancel reçu en état {self.state.value}")
            self._reset()
            return None

        if isinstance(event, Drop):
            if self.state is not DragState.DRAGGING:
                raise InvalidDragTransition(f"Drop reçu en état {self.state.value}")
            self.state = DragState.RESOLVING
            try:
                return resolve_drop(elements, self.source, event.target)
            finally:
                self._reset()

        raise TypeError(f"Événement de drag inconnu : {event!r}")

    def _reset(self) -> None:
        self.state = DragState.IDLE
        self.source = None
