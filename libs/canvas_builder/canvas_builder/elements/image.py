"""Image — image seule, pleine largeur par défaut."""
from typing import Optional
from .base import ElementContent, ElementStyles


class ImageContent(ElementContent):
    src: str = ""
    alt: str = ""


class ImageStyles(ElementStyles):
    width: Optional[str] = None
    max_width: Optional[str] = None
    border_radius: Optional[str] = None
