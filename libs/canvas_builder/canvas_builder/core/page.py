"""
Page — métadonnées + Document, tel qu'échangé avec la persistance.
Clés camelCase sur le fil (metaTitle, focusKeywords, aiSeoScore…).
"""
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .document import Document

PageStatus = Literal["draft", "published"]


class PageData(BaseModel):
    """Page éditée dans le builder (snapshot immuable)."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    site_id: str
    title: str
    slug: str
    status: PageStatus = "draft"
    ai_seo_score: int = 0
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    focus_keywords: List[str] = Field(default_factory=list)
    content: Document = Field(default_factory=Document)

    @field_validator("content", mode="before")
    @classmethod
    def _empty_content(cls, v: Any) -> Any:
        # contenu absent/vide → {"elements": []}
        return v or {"elements": []}


class SeoMetadata(BaseModel):
    """Champs SEO produits par le générateur IA (sans rapport avec l'arbre)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    meta_title: str
    meta_description: str
    focus_keywords: List[str] = Field(default_factory=list)
    ai_seo_score: int = Field(default=0, ge=0, le=100)
