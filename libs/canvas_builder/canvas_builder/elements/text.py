"""Text — paragraphe."""
from typing import Optional
from .base import ElementContent, ElementStyles


class TextContent(ElementContent):
    text: str = ""


class TextStyles(ElementStyles):
    font_size: Optional[str] = None
    line_height: Optional[str] = None
    text_align: Optional[str] = None
    color: Optional[str] = None
