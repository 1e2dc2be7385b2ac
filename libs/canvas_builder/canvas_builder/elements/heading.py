"""Heading — titre h1..h6."""
from typing import Literal, Optional
from .base import ElementContent, ElementStyles

HeadingLevel = Literal["h1", "h2", "h3", "h4", "h5", "h6"]


class HeadingContent(ElementContent):
    text: str = "New Heading"
    level: HeadingLevel = "h2"


class HeadingStyles(ElementStyles):
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    text_align: Optional[str] = None
    color: Optional[str] = None
    letter_spacing: Optional[str] = None
