"""
Tree Query Engine — parcours en profondeur (pré-ordre) de l'arbre d'éléments.

Toutes les opérations sont copy-on-write : l'arbre d'entrée n'est jamais
modifié, seuls les conteneurs situés sur le chemin vers le nœud touché sont
recréés ; les sous-arbres intacts sont partagés avec l'arbre d'origine.
Un id introuvable est un no-op silencieux.
"""
import logging
from collections import Counter
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from ..elements import AnyElement, ElementContent, ElementStyles
from .errors import UnknownFieldError
from .factory import create_element

log = logging.getLogger(__name__)

Elements = Sequence[AnyElement]


def children_of(element: AnyElement) -> List[AnyElement]:
    """Enfants d'un conteneur ; liste vide pour une feuille."""
    return getattr(element, "children", None) or []


def with_children(element: AnyElement, children: List[AnyElement]) -> AnyElement:
    return element.model_copy(update={"children": children})


# ── Lecture ─────────────────────────────────────────────────────────────────

def iter_elements(elements: Elements) -> Iterator[AnyElement]:
    """Parcours pré-ordre : un nœud, puis ses enfants, puis ses frères suivants."""
    for el in elements:
        yield el
        yield from iter_elements(children_of(el))


def find_element(elements: Elements, element_id: str) -> Optional[AnyElement]:
    for el in iter_elements(elements):
        if el.id == element_id:
            return el
    return None


def locate(
    elements: Elements, element_id: str, parent: Optional[AnyElement] = None
) -> Optional[Tuple[Optional[AnyElement], int]]:
    """(parent, index) du nœud `element_id` ; parent None = séquence racine."""
    for i, el in enumerate(elements):
        if el.id == element_id:
            return parent, i
        found = locate(children_of(el), element_id, el)
        if found is not None:
            return found
    return None


def find_parent(elements: Elements, element_id: str) -> Optional[AnyElement]:
    """Conteneur direct de `element_id` (None si racine ou absent)."""
    found = locate(elements, element_id)
    return found[0] if found else None


def collect_ids(elements: Elements) -> List[str]:
    return [el.id for el in iter_elements(elements)]


def validate_tree(elements: Elements) -> List[str]:
    """Liste des violations d'invariants (vide si l'arbre est valide)."""
    errors = []
    duplicates = [i for i, n in Counter(collect_ids(elements)).items() if n > 1]
    for dup in duplicates:
        errors.append(f"id dupliqué : {dup}")

    def _walk(nodes: Elements, parent: Optional[AnyElement]) -> None:
        for el in nodes:
            if el.type == "Section" and parent is not None:
                errors.append(f"Section {el.id} hors racine (dans {parent.type} {parent.id})")
            if parent is not None and parent.type == "Grid" and el.type != "Column":
                errors.append(f"{el.type} {el.id} enfant direct de la Grid {parent.id}")
            _walk(children_of(el), el)

    _walk(elements, None)
    return errors


# ── Réécriture copy-on-write ────────────────────────────────────────────────

def _rewrite(
    elements: Elements, element_id: str, fn: Callable[[AnyElement], Optional[AnyElement]]
) -> Optional[List[AnyElement]]:
    """
    Applique `fn` au nœud `element_id` (None → suppression du nœud).
    Retourne la nouvelle séquence, ou None si l'id est absent.
    """
    for i, el in enumerate(elements):
        if el.id == element_id:
            replacement = fn(el)
            out = list(elements)
            if replacement is None:
                del out[i]
            else:
                out[i] = replacement
            return out
        kids = children_of(el)
        if kids:
            new_kids = _rewrite(kids, element_id, fn)
            if new_kids is not None:
                out = list(elements)
                out[i] = with_children(el, new_kids)
                return out
    return None


def _merge(record, partial: Optional[dict], element_type: str):
    """Merge superficiel d'un dict partiel (clés camelCase ou snake_case) dans un record typé."""
    if not partial:
        return record
    cls = type(record)
    names = {}
    for name, field in cls.model_fields.items():
        names[name] = name
        if field.alias:
            names[field.alias] = name
    unknown = sorted(k for k in partial if k not in names)
    if unknown:
        raise UnknownFieldError(element_type, unknown)
    data = record.model_dump(exclude_none=True)
    data.update({names[k]: v for k, v in partial.items()})
    return cls.model_validate(data)


def update_element(
    elements: Elements,
    element_id: str,
    content: Optional[dict] = None,
    styles: Optional[dict] = None,
) -> List[AnyElement]:
    """
    Merge `content`/`styles` dans l'élément ciblé.

    Les clés non reconnues par la variante lèvent UnknownFieldError (rien n'est
    appliqué). Une valeur de style à None retire l'attribut.
    """
    def _apply(el: AnyElement) -> AnyElement:
        new_content: ElementContent = _merge(el.content, content, el.type)
        new_styles: ElementStyles = _merge(el.styles, styles, el.type)
        return el.model_copy(update={"content": new_content, "styles": new_styles})

    updated = _rewrite(elements, element_id, _apply)
    if updated is None:
        log.debug("update_element : %s introuvable", element_id)
        return list(elements)
    return updated


def delete_element(elements: Elements, element_id: str) -> List[AnyElement]:
    """Supprime l'élément et tout son sous-arbre ; ordre des frères conservé."""
    updated = _rewrite(elements, element_id, lambda el: None)
    if updated is None:
        log.debug("delete_element : %s introuvable", element_id)
        return list(elements)
    return updated


def set_column_count(elements: Elements, grid_id: str, count: int) -> List[AnyElement]:
    """
    Ajuste le nombre de colonnes d'une Grid.

    Plus de colonnes : ajoute des Column neuves à la fin, les existantes intactes.
    Moins de colonnes : les dernières colonnes et leurs sous-arbres sont supprimés.
    """
    if count < 1:
        raise ValueError(f"Une Grid a au moins 1 colonne (reçu {count})")
    grid = find_element(elements, grid_id)
    if grid is None or grid.type != "Grid":
        log.debug("set_column_count : %s n'est pas une Grid", grid_id)
        return list(elements)

    def _resize(el: AnyElement) -> AnyElement:
        columns = list(el.children)
        if len(columns) < count:
            columns.extend(create_element("Column") for _ in range(count - len(columns)))
        else:
            columns = columns[:count]
        return with_children(el, columns)

    return _rewrite(elements, grid_id, _resize)


# ── Primitives du drag & drop ───────────────────────────────────────────────

def extract_element(
    elements: Elements, element_id: str
) -> Tuple[Optional[AnyElement], List[AnyElement]]:
    """Détache un nœud (et son sous-arbre) : (nœud, arbre troué) ou (None, arbre)."""
    extracted: List[AnyElement] = []

    def _take(el: AnyElement) -> None:
        extracted.append(el)
        return None

    updated = _rewrite(elements, element_id, _take)
    if updated is None:
        return None, list(elements)
    return extracted[0], updated


def append_child(
    elements: Elements, container_id: str, node: AnyElement
) -> Optional[List[AnyElement]]:
    """Ajoute `node` en fin des enfants du conteneur (None si conteneur absent)."""
    def _append(el: AnyElement) -> AnyElement:
        if not el.is_container:
            raise ValueError(f"{el.type} {el.id} n'accepte pas d'enfants")
        return with_children(el, [*el.children, node])

    return _rewrite(elements, container_id, _append)


def insert_before(
    elements: Elements, target_id: str, node: AnyElement
) -> Optional[List[AnyElement]]:
    """
    Insère `node` juste avant `target_id` dans la séquence qui le contient.
    Le niveau courant est examiné avant les sous-arbres ; None si cible absente.
    """
    for i, el in enumerate(elements):
        if el.id == target_id:
            return [*elements[:i], node, *elements[i:]]
    for i, el in enumerate(elements):
        kids = children_of(el)
        if kids:
            new_kids = insert_before(kids, target_id, node)
            if new_kids is not None:
                out = list(elements)
                out[i] = with_children(el, new_kids)
                return out
    return None
