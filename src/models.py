"""
Data models — Site, Page
SQLAlchemy (SQLite) + Pydantic v2 (schemas camelCase côté builder)
"""
import uuid
from datetime import datetime
from typing import List, Optional

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from canvas_builder import Document, PageStatus


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class SiteDB(Base):
    __tablename__ = "sites"
    site_id:    Mapped[str]      = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name:       Mapped[str]      = mapped_column(sa.String, nullable=False)
    slug:       Mapped[str]      = mapped_column(sa.String, nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(sa.DateTime, default=datetime.utcnow)

    pages: Mapped[List["PageDB"]] = relationship(
        "PageDB", back_populates="site", cascade="all, delete-orphan", order_by="PageDB.created_at"
    )


class PageDB(Base):
    __tablename__ = "pages"
    __table_args__ = (sa.UniqueConstraint("site_id", "slug"),)

    page_id:          Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    site_id:          Mapped[str]           = mapped_column(sa.String, sa.ForeignKey("sites.site_id"), nullable=False)
    title:            Mapped[str]           = mapped_column(sa.String, nullable=False)
    slug:             Mapped[str]           = mapped_column(sa.String, nullable=False)
    status:           Mapped[str]           = mapped_column(sa.String, default="draft")
    meta_title:       Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    meta_description: Mapped[Optional[str]] = mapped_column(sa.Text, nullable=True)
    focus_keywords:   Mapped[str]           = mapped_column(sa.Text, default="[]")
    ai_seo_score:     Mapped[int]           = mapped_column(sa.Integer, default=0)
    content:          Mapped[Optional[str]] = mapped_column(sa.Text, nullable=True)   # {"elements": [...]}
    created_at:       Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:       Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    site: Mapped["SiteDB"] = relationship("SiteDB", back_populates="pages")


# ── PYDANTIC SCHEMAS ────────────────────────────────────────────────────

class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SiteCreate(_CamelModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=r"^[a-z0-9-]+$")


class PageCreate(_CamelModel):
    title: str = Field(min_length=1)
    slug:  str = Field(min_length=1)
    status: PageStatus = "draft"


class PageUpdate(_CamelModel):
    """Corps du PATCH envoyé par le builder ; seuls les champs présents sont appliqués."""
    title:            Optional[str]        = None
    slug:             Optional[str]        = None
    status:           Optional[PageStatus] = None
    meta_title:       Optional[str]        = None
    meta_description: Optional[str]        = None
    focus_keywords:   Optional[List[str]]  = None
    ai_seo_score:     Optional[int]        = Field(default=None, ge=0, le=100)
    content:          Optional[Document]   = None

    @field_validator("title", "slug", "status", "ai_seo_score")
    @classmethod
    def _not_null(cls, v):
        # colonnes NOT NULL : omettre le champ, ne pas l'envoyer à null
        if v is None:
            raise ValueError("ne peut pas être null")
        return v


class SeoRequest(_CamelModel):
    page_title: str
    site_name:  str
