"""Tests BuilderSession — sélection, drop, édition, sauvegarde, SEO."""
import sys
from pathlib import Path
from unittest.mock import MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from canvas_builder import (
    BuilderSession, ButtonElement, ColumnElement, Document, ElementTarget, GridElement,
    NodeSource, NotificationLevel, PageData, PaletteSource, PlaceholderTarget, RenderMode,
    SectionElement, SeoMetadata, collect_ids, find_element,
)

ROOT = PlaceholderTarget(container_id="root")


def _page(page_id="p1", elements=None):
    return PageData(
        id=page_id, site_id="site-1", title="Accueil", slug="home",
        content=Document(elements=elements or []),
    )


def _nested_button_page():
    button = ButtonElement(id="btn")
    return _page(elements=[SectionElement(id="sec", children=[ColumnElement(id="col", children=[button])])])


@pytest.fixture
def store():
    s = MagicMock()
    s.save_page.return_value = True
    return s


@pytest.fixture
def session(store):
    return BuilderSession(site_name="Acme", pages=[_nested_button_page(), _page("p2")], store=store)


# ── Construction ──────────────────────────────────────────────────────────────

def test_session_requires_pages():
    with pytest.raises(ValueError):
        BuilderSession(site_name="Acme", pages=[])


def test_page_without_content_starts_empty():
    page = PageData.model_validate({"id": "p", "siteId": "s", "title": "T", "slug": "t", "content": None})
    assert BuilderSession(site_name="Acme", pages=[page]).elements == []


# ── Sélection & suppression ──────────────────────────────────────────────────

def test_delete_selected_nested_button(session):
    session.select("btn")
    assert session.selected_element.type == "Button"
    session.delete_selected()
    column = find_element(session.elements, "col")
    assert column.children == []
    assert session.selected_element_id is None
    assert session.notifier.last.level is NotificationLevel.SUCCESS
    assert session.notifier.last.message == "Element deleted"


def test_delete_without_selection_is_noop(session):
    before = session.elements
    session.delete_selected()
    assert session.elements == before
    assert session.notifier.history == []


def test_delete_missing_selection_is_silent(session):
    before = session.elements
    session.select("ghost")
    session.delete_selected()
    assert session.elements == before
    assert session.notifier.history == []


def test_switch_page_clears_selection(session):
    session.select("btn")
    session.switch_page("p2")
    assert session.active_page.id == "p2"
    assert session.selected_element_id is None
    with pytest.raises(KeyError):
        session.switch_page("nope")


# ── Drag & drop ──────────────────────────────────────────────────────────────

def test_palette_drop_selects_new_element(session):
    session.panel_tab = "seo"
    session.start_drag(PaletteSource(element_type="Heading"))
    result = session.drop(PlaceholderTarget(container_id="col"))
    assert result.accepted
    assert session.selected_element_id == result.element_id
    assert session.panel_tab == "design"
    assert [c.type for c in find_element(session.elements, "col").children] == ["Button", "Heading"]


def test_move_keeps_selection(session):
    session.select("sec")
    session.start_drag(NodeSource(element_id="btn"))
    session.drop(ElementTarget(element_id="sec"))
    assert [el.id for el in session.elements] == ["btn", "sec"]
    assert session.selected_element_id == "sec"


def test_rejected_drop_notifies_and_keeps_tree(session):
    before = session.elements
    session.start_drag(PaletteSource(element_type="Section"))
    result = session.drop(PlaceholderTarget(container_id="col"))
    assert not result.accepted
    assert session.elements == before
    assert session.notifier.last.level is NotificationLevel.ERROR
    assert session.notifier.last.message == "Sections must remain at the root level."
    assert session.drag.source is None


def test_cancel_drag(session):
    session.start_drag(PaletteSource(element_type="Text"))
    session.cancel_drag()
    session.start_drag(PaletteSource(element_type="Text"))
    assert session.drop(None).reason.startswith("Missed the drop zone")


# ── Panneau de propriétés ────────────────────────────────────────────────────

def test_update_element(session):
    assert session.update_element("btn", content={"text": "Acheter", "url": "/shop"}, styles={"borderRadius": "9999px"})
    button = find_element(session.elements, "btn")
    assert button.content.text == "Acheter"
    assert button.styles.border_radius == "9999px"


def test_update_unknown_field_notifies(session):
    before = session.elements
    assert session.update_element("btn", content={"icon": "star"}) is False
    assert session.elements == before
    assert session.notifier.last.level is NotificationLevel.ERROR


def test_set_grid_columns():
    session = BuilderSession(site_name="Acme", pages=[_page(elements=[GridElement(id="g")])])
    assert session.set_grid_columns("g", 3) is True
    assert len(find_element(session.elements, "g").children) == 3


def test_set_grid_columns_below_one_notifies():
    session = BuilderSession(site_name="Acme", pages=[_page(elements=[GridElement(id="g")])])
    before = session.elements
    assert session.set_grid_columns("g", 0) is False
    assert session.elements == before
    assert session.notifier.last.level is NotificationLevel.ERROR


def test_drop_unknown_palette_type_notifies(session):
    before = session.elements
    session.start_drag(PaletteSource(element_type="Carousel"))
    result = session.drop(ROOT)
    assert not result.accepted
    assert session.elements == before
    assert session.notifier.last.level is NotificationLevel.ERROR
    session.start_drag(PaletteSource(element_type="Heading"))
    assert session.drop(ROOT).accepted


def test_update_page_metadata(session):
    session.update_page(title="Nouveau titre", status="published")
    assert session.active_page.title == "Nouveau titre"
    assert session.active_page.status == "published"
    assert collect_ids(session.elements) == ["sec", "col", "btn"]


def test_render_editable_shows_selection(session):
    session.select("btn")
    html = session.render()
    assert "BUTTON" in html
    assert "cb-" not in session.render(RenderMode.LIVE)


# ── Sauvegarde ───────────────────────────────────────────────────────────────

def test_save_success(session, store):
    assert session.save() is True
    store.save_page.assert_called_once_with(session.active_page)
    assert session.notifier.last.message == "Saved to database!"


def test_save_snapshot_is_immutable(session, store):
    session.save()
    saved = store.save_page.call_args[0][0]
    session.start_drag(PaletteSource(element_type="Section"))
    session.drop(ROOT)
    assert len(saved.content.elements) == 1
    assert len(session.elements) == 2


def test_save_failure_keeps_tree(session, store):
    store.save_page.side_effect = Exception("db down")
    session.start_drag(PaletteSource(element_type="Section"))
    session.drop(ROOT)
    edited = session.elements
    assert session.save() is False
    assert session.elements == edited
    assert session.notifier.last.level is NotificationLevel.ERROR
    assert session.notifier.last.message == "Failed to save."


def test_save_refused_by_store(session, store):
    store.save_page.return_value = False
    assert session.save() is False
    assert session.notifier.last.message == "Failed to save."


def test_save_without_store():
    session = BuilderSession(site_name="Acme", pages=[_page()])
    assert session.save() is False


# ── SEO ──────────────────────────────────────────────────────────────────────

def test_generate_seo_fills_metadata(session):
    generator = MagicMock(return_value=SeoMetadata(
        meta_title="Accueil | Acme",
        meta_description="Découvrez Acme.",
        focus_keywords=["acme", "accueil"],
        ai_seo_score=92,
    ))
    session.seo_generator = generator
    before = session.elements
    assert session.generate_seo() is True
    generator.assert_called_once_with("Accueil", "Acme")
    page = session.active_page
    assert page.meta_title == "Accueil | Acme"
    assert page.focus_keywords == ["acme", "accueil"]
    assert page.ai_seo_score == 92
    assert session.elements == before
    assert session.notifier.last.message == "AI optimized SEO metadata!"


def test_generate_seo_failure(session):
    session.seo_generator = MagicMock(side_effect=Exception("timeout"))
    assert session.generate_seo() is False
    assert session.notifier.last.message == "Failed to reach AI."
