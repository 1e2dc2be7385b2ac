"""
Session d'édition du Canvas Builder.

Une session possède les pages d'un site, la page active, l'élément
sélectionné et l'onglet du panneau de propriétés. Chaque mutation s'exécute
en entier dans un appel et remplace le Document de la page active en bloc.
Les échecs d'édition (drop refusé, type inconnu, propriété invalide, nombre
de colonnes < 1, sauvegarde, IA) passent par le Notifier. Seules les erreurs
d'appel lèvent : page inconnue (KeyError), id de page modifié (ValueError),
transition de drag invalide (InvalidDragTransition).
"""
import logging
from typing import Callable, Dict, List, Literal, Optional, Protocol, Sequence

from pydantic import ValidationError

from .core.document import Document
from .core.drag import DragCancel, DragController, DragSource, DragStart, Drop, DropResult, DropTarget
from .core.errors import UnknownFieldError
from .core.notifications import Notifier
from .core.page import PageData, SeoMetadata
from .core.tree import delete_element, find_element, set_column_count, update_element
from .elements import AnyElement
from .renderer.base import RenderMode
from .renderer.html import render_elements

log = logging.getLogger(__name__)

PanelTab = Literal["design", "page", "seo"]

SeoGenerator = Callable[[str, str], SeoMetadata]


class PageStore(Protocol):
    """Collaborateur de persistance : enregistre un snapshot de page."""

    def save_page(self, page: PageData) -> bool: ...


class BuilderSession:
    """
    Session d'édition d'un site.

    Usage:
        >>> session = BuilderSession(site_name="Acme", pages=[page], store=store)
        >>> session.start_drag(PaletteSource(element_type="Heading"))
        >>> session.drop(PlaceholderTarget(container_id="root"))
        >>> session.save()
    """

    def __init__(
        self,
        site_name: str,
        pages: Sequence[PageData],
        store: Optional[PageStore] = None,
        seo_generator: Optional[SeoGenerator] = None,
        notifier: Optional[Notifier] = None,
    ):
        if not pages:
            raise ValueError("Une session de builder a besoin d'au moins une page")
        self.site_name = site_name
        self.pages: Dict[str, PageData] = {p.id: p for p in pages}
        self.active_page_id: str = pages[0].id
        self.selected_element_id: Optional[str] = None
        self.panel_tab: PanelTab = "design"
        self.store = store
        self.seo_generator = seo_generator
        self.notifier = notifier or Notifier()
        self.drag = DragController()

    # ── Lecture ─────────────────────────────────────────────────────────────

    @property
    def active_page(self) -> PageData:
        return self.pages[self.active_page_id]

    @property
    def elements(self) -> List[AnyElement]:
        return self.active_page.content.elements

    @property
    def selected_element(self) -> Optional[AnyElement]:
        if self.selected_element_id is None:
            return None
        return find_element(self.elements, self.selected_element_id)

    def render(self, mode: RenderMode = RenderMode.EDITABLE) -> str:
        """Canvas de la page active (editable) ou aperçu (live)."""
        selected = self.selected_element_id if mode is RenderMode.EDITABLE else None
        return render_elements(self.elements, mode=mode, selected_id=selected)

    # ── Navigation ──────────────────────────────────────────────────────────

    def switch_page(self, page_id: str) -> None:
        if page_id not in self.pages:
            raise KeyError(f"Page inconnue : {page_id}")
        self.active_page_id = page_id
        self.selected_element_id = None

    def select(self, element_id: Optional[str]) -> None:
        """Callback de sélection du canvas (None = clic hors élément)."""
        self.selected_element_id = element_id

    # ── Drag & drop ─────────────────────────────────────────────────────────

    def start_drag(self, source: DragSource) -> None:
        self.drag.dispatch(DragStart(source=source))

    def cancel_drag(self) -> None:
        self.drag.dispatch(DragCancel())

    def drop(self, target: Optional[DropTarget]) -> DropResult:
        result = self.drag.dispatch(Drop(target=target), self.elements)
        if not result.accepted:
            self.notifier.error(result.reason)
            return result
        self._commit(result.elements)
        if result.is_new:
            self.selected_element_id = result.element_id
            self.panel_tab = "design"
        return result

    # ── Panneau de propriétés ───────────────────────────────────────────────

    def update_element(
        self, element_id: str, content: Optional[dict] = None, styles: Optional[dict] = None
    ) -> bool:
        try:
            elements = update_element(self.elements, element_id, content=content, styles=styles)
        except (UnknownFieldError, ValidationError) as e:
            log.warning("Édition refusée sur %s : %s", element_id, e)
            self.notifier.error(f"Invalid property: {e}")
            return False
        self._commit(elements)
        return True

    def set_grid_columns(self, grid_id: str, count: int) -> bool:
        try:
            elements = set_column_count(self.elements, grid_id, count)
        except ValueError as e:
            log.warning("Colonnes refusées sur %s : %s", grid_id, e)
            self.notifier.error("A grid needs at least one column.")
            return False
        self._commit(elements)
        return True

    def delete_selected(self) -> None:
        if self.selected_element_id is None:
            return
        if find_element(self.elements, self.selected_element_id) is None:
            log.debug("delete_selected : %s introuvable", self.selected_element_id)
            return
        self._commit(delete_element(self.elements, self.selected_element_id))
        self.selected_element_id = None
        self.notifier.success("Element deleted")

    def update_page(self, **fields) -> None:
        """Métadonnées de la page active (title, slug, status, meta_title…)."""
        if "id" in fields:
            raise ValueError("L'id d'une page n'est pas modifiable")
        page = self.active_page
        data = page.model_dump()
        data.update(fields)
        self.pages[page.id] = PageData.model_validate(data)

    # ── Collaborateurs externes ─────────────────────────────────────────────

    def generate_seo(self) -> bool:
        """Remplit les champs SEO via le générateur IA ; l'arbre n'est pas touché."""
        if self.seo_generator is None:
            self.notifier.error("Failed to reach AI.")
            return False
        try:
            seo = self.seo_generator(self.active_page.title, self.site_name)
        except Exception as e:
            log.error("Génération SEO échouée : %s", e)
            self.notifier.error("Failed to reach AI.")
            return False
        self.update_page(
            meta_title=seo.meta_title,
            meta_description=seo.meta_description,
            focus_keywords=seo.focus_keywords,
            ai_seo_score=seo.ai_seo_score,
        )
        self.notifier.success("AI optimized SEO metadata!")
        return True

    def save(self) -> bool:
        """
        Envoie un snapshot de la page active à la persistance.

        Le snapshot est immuable : les éditions suivantes ne l'affectent pas.
        En cas d'échec l'arbre en mémoire est conservé ; réessayer = rappeler save().
        """
        snapshot = self.active_page
        if self.store is None:
            self.notifier.error("Failed to save.")
            return False
        try:
            ok = self.store.save_page(snapshot)
        except Exception as e:
            log.error("Sauvegarde de la page %s échouée : %s", snapshot.id, e)
            ok = False
        if ok:
            log.info("Page %s sauvegardée (%d éléments racine)", snapshot.id, len(snapshot.content.elements))
            self.notifier.success("Saved to database!")
        else:
            self.notifier.error("Failed to save.")
        return ok

    # ── Interne ─────────────────────────────────────────────────────────────

    def _commit(self, elements: List[AnyElement]) -> None:
        page = self.active_page
        self.pages[page.id] = page.model_copy(update={"content": Document(elements=elements)})
