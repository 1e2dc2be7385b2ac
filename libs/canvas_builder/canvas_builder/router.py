"""
Router FastAPI — endpoints canvas_builder.

POST /canvas/render    → Document → HTMLResponse (mode live)
POST /canvas/validate  → Document brut → {"valid": bool, "errors"?}
GET  /canvas/catalog   → types d'éléments + JSON schemas + valeurs par défaut
"""
from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from .core.document import Document, dump_elements, parse_document
from .core.factory import create_element
from .core.tree import validate_tree
from .elements import ELEMENT_TYPES
from .renderer.base import RenderMode
from .renderer.html import render_elements

router = APIRouter(prefix="/canvas", tags=["canvas_builder"])


@router.post("/render", response_class=HTMLResponse, summary="Rend un document en HTML (live)")
def render(document: Document) -> HTMLResponse:
    """Reçoit {"elements": [...]}, retourne le fragment HTML sans affordances d'édition."""
    return HTMLResponse(content=render_elements(document.elements, mode=RenderMode.LIVE))


@router.post("/validate", summary="Valide un document sans le rendre")
def validate(payload: dict = Body(...)) -> dict:
    """Valide le format (types, champs) puis les invariants de l'arbre."""
    try:
        document = parse_document(payload)
    except ValidationError as e:
        return {"valid": False, "errors": [err["msg"] for err in e.errors()]}
    errors = validate_tree(document.elements)
    if errors:
        return {"valid": False, "errors": errors}
    return {"valid": True}


@router.get("/catalog", summary="Liste les éléments disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne le catalogue de la palette : schema Pydantic + élément par défaut."""
    catalog_data = []
    for name, cls in ELEMENT_TYPES.items():
        catalog_data.append({
            "type":      name,
            "container": cls.is_container,
            "schema":    cls.model_json_schema(by_alias=True),
            "defaults":  dump_elements([create_element(name)])[0],
        })
    return JSONResponse({"elements": catalog_data})
