"""Grid — N colonnes côte à côte (N = nombre d'enfants Column)."""
from typing import Optional
from .base import ElementStyles


class GridStyles(ElementStyles):
    gap: Optional[str] = None
    padding: Optional[str] = None
    align_items: Optional[str] = None
