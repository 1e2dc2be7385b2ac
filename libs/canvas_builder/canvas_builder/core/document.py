"""
Document — séquence ordonnée des éléments racine d'une page.

Forme stockée/transmise (contrat exact) :
  {"elements": [{"id", "type", "content": {...}, "styles": {...}, "children"?: [...]}]}
Les styles non renseignés sont omis ; `children` n'existe que sur les conteneurs.
"""
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..elements import AnyElement

_ELEMENTS_ADAPTER = TypeAdapter(List[AnyElement])


class Document(BaseModel):
    """Arbre complet d'une page (remplacé en bloc à chaque mutation)."""
    model_config = ConfigDict(frozen=True)

    elements: List[AnyElement] = Field(default_factory=list)


def parse_document(data: Optional[dict]) -> Document:
    """Document stocké → Document typé. Absent/vide → {"elements": []}."""
    if not data:
        return Document()
    return Document(elements=parse_elements(data.get("elements") or []))


def parse_elements(raw: Sequence[Any]) -> List[AnyElement]:
    return _ELEMENTS_ADAPTER.validate_python(list(raw))


def dump_elements(elements: Sequence[AnyElement]) -> List[dict]:
    return [el.model_dump(by_alias=True, exclude_none=True) for el in elements]


def dump_document(document: Document) -> dict:
    """Document typé → forme stockée."""
    return {"elements": dump_elements(document.elements)}
