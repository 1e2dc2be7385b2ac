"""Section — bloc racine pleine largeur, contenu centré."""
from typing import Optional
from .base import ElementStyles


class SectionStyles(ElementStyles):
    padding: Optional[str] = None
    background_color: Optional[str] = None
