"""Button — lien stylé en bouton plein."""
from typing import Optional
from .base import ElementContent, ElementStyles


class ButtonContent(ElementContent):
    text: str = "Click Me"
    url: str = "#"


class ButtonStyles(ElementStyles):
    background_color: Optional[str] = None
    color: Optional[str] = None
    padding: Optional[str] = None
    border_radius: Optional[str] = None
    text_align: Optional[str] = None
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
