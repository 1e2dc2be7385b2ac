"""Column — flux vertical, enfant direct d'une Grid."""
from typing import Optional
from .base import ElementStyles


class ColumnStyles(ElementStyles):
    padding: Optional[str] = None
    background_color: Optional[str] = None
