"""
Mode de rendu + contexte threadé dans tout le dispatch.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RenderMode(str, Enum):
    EDITABLE = "editable"   # canvas : sélection, survol, badges, zones de drop
    LIVE     = "live"       # page publique : HTML statique minimal


class RenderContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: RenderMode = RenderMode.LIVE
    selected_id: Optional[str] = None
    on_select: str = "selectElement"    # callback JS appelé avec l'id cliqué

    @property
    def editable(self) -> bool:
        return self.mode is RenderMode.EDITABLE
