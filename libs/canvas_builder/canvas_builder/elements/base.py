"""
Éléments de base du canvas.
Content/Styles séparés + BaseElement discriminé par `type`.
"""
import uuid
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def new_element_id() -> str:
    """Identifiant opaque, unique sur tout l'arbre, jamais réutilisé."""
    return f"el-{uuid.uuid4().hex}"


class ElementContent(BaseModel):
    """Contenu d'un élément (textes, URLs). Clés inconnues ignorées au parsing."""
    model_config = ConfigDict(frozen=True, extra="ignore")


class ElementStyles(BaseModel):
    """Styles d'un élément — clés camelCase sur le fil, valeurs string."""
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ContainerContent(ElementContent):
    """Les conteneurs (Section, Grid, Column) n'ont pas de contenu propre."""
    pass


class BaseElement(BaseModel):
    """Nœud de l'arbre (classe parente des 7 variantes)."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_element_id)
    type: str

    is_container: ClassVar[bool] = False

    @property
    def badge(self) -> str:
        """Libellé affiché sur l'élément sélectionné dans le canvas."""
        return self.type.upper()
