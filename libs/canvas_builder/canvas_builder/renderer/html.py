"""
Renderer HTML dual-mode — dispatch par type d'élément.

Les deux modes produisent la même structure de base. Le mode editable
ajoute uniquement des décorations :
  - attributs `data-cb-id` / `data-cb-type` + `onclick` (sélection, sans propagation)
  - classes `cb-node` (survol) et `cb-selected`
  - éléments `div.cb-ui` : badge de type, zones « drop here »
"""
from html import escape
from typing import Dict, Optional, Sequence

from ..core.document import Document
from ..core.drag import PLACEHOLDER_PREFIX, ROOT_ID
from ..elements import (
    AnyElement,
    SectionElement, GridElement, ColumnElement,
    HeadingElement, TextElement, ButtonElement, ImageElement,
)
from .base import RenderContext, RenderMode


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_elements(
    elements: Sequence[AnyElement],
    mode: RenderMode = RenderMode.LIVE,
    selected_id: Optional[str] = None,
    on_select: str = "selectElement",
) -> str:
    """Rend la séquence racine d'un document (fragment HTML)."""
    ctx = RenderContext(mode=mode, selected_id=selected_id, on_select=on_select)
    return _render_sequence(elements, ctx, ROOT_ID)


def render_page(
    document: Document,
    title: str = "",
    description: Optional[str] = None,
    keywords: Sequence[str] = (),
    lang: str = "en",
    mode: RenderMode = RenderMode.LIVE,
    selected_id: Optional[str] = None,
) -> str:
    """Génère le HTML complet d'une page (page publique en mode live)."""
    body = render_elements(document.elements, mode=mode, selected_id=selected_id)
    css = _BASE_CSS + (_EDITOR_CSS if mode is RenderMode.EDITABLE else "")
    meta_desc = f'<meta name="description" content="{_attr(description)}">' if description else ""
    meta_kw = f'<meta name="keywords" content="{_attr(", ".join(keywords))}">' if keywords else ""

    return f"""<!DOCTYPE html>
<html lang="{_attr(lang)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(title)}</title>
  {meta_desc}
  {meta_kw}
  <style>{css}</style>
</head>
<body>
<main class="canvas-root">
{body}
</main>
</body>
</html>"""


# ── Dispatch ────────────────────────────────────────────────────────────────

def render_element(el: AnyElement, ctx: RenderContext) -> str:
    """Dispatch vers le renderer de la variante."""
    if isinstance(el, SectionElement): return render_section(el, ctx)
    if isinstance(el, GridElement):    return render_grid(el, ctx)
    if isinstance(el, ColumnElement):  return render_column(el, ctx)
    if isinstance(el, HeadingElement): return render_heading(el, ctx)
    if isinstance(el, TextElement):    return render_text(el, ctx)
    if isinstance(el, ButtonElement):  return render_button(el, ctx)
    if isinstance(el, ImageElement):   return render_image(el, ctx)

    return f"<!-- Élément non implémenté : {escape(getattr(el, 'type', '?'))} -->"


def _render_sequence(elements: Sequence[AnyElement], ctx: RenderContext, container_id: Optional[str]) -> str:
    """Enfants d'un conteneur ; `container_id` None = pas de zone de drop (Grid)."""
    parts = [render_element(el, ctx) for el in elements]
    if ctx.editable and container_id is not None:
        parts.append(_placeholder(container_id, empty=not elements))
    return "\n".join(parts)


# ── Helpers ─────────────────────────────────────────────────────────────────

def _attr(value) -> str:
    return escape(str(value), quote=True)


def _style(props: Dict[str, Optional[str]]) -> str:
    return _attr(";".join(f"{k}:{v}" for k, v in props.items() if v))


def _open(tag: str, el: AnyElement, ctx: RenderContext, css_class: str, style: str) -> str:
    """Balise ouvrante du nœud ; décorations ajoutées après les attributs de base."""
    classes, extra = css_class, ""
    if ctx.editable:
        classes += " cb-node"
        if el.id == ctx.selected_id:
            classes += " cb-selected"
        extra = (
            f' data-cb-id="{_attr(el.id)}" data-cb-type="{el.type}"'
            f' onclick="event.stopPropagation();{ctx.on_select}(this.dataset.cbId)"'
        )
    return f'<{tag} class="{classes}" style="{style}"{extra}>'


def _badge(el: AnyElement, ctx: RenderContext) -> str:
    if not ctx.editable or el.id != ctx.selected_id:
        return ""
    return f'\n<div class="cb-ui cb-badge">{escape(el.badge)}</div>'


def _placeholder(container_id: str, empty: bool) -> str:
    label = "Drag module here" if empty else "Add module"
    modifier = " cb-placeholder--empty" if empty else ""
    return (
        f'<div class="cb-ui cb-placeholder{modifier}" '
        f'data-cb-drop="{PLACEHOLDER_PREFIX}{_attr(container_id)}">{label}</div>'
    )


# ── Conteneurs ──────────────────────────────────────────────────────────────

def render_section(el: SectionElement, ctx: RenderContext) -> str:
    s = el.styles
    style = _style({
        "position": "relative",
        "background-color": s.background_color or "#ffffff",
        "padding": s.padding or "4rem 2rem",
    })
    inner = _render_sequence(el.children, ctx, el.id)
    return (
        f'{_open("section", el, ctx, "canvas-section", style)}\n'
        f'<div class="canvas-section__inner" style="max-width:1200px;margin:0 auto;width:100%;display:flex;flex-direction:column">\n'
        f'{inner}\n'
        f'</div>{_badge(el, ctx)}\n'
        f'</section>'
    )


def render_grid(el: GridElement, ctx: RenderContext) -> str:
    s = el.styles
    columns = max(len(el.children), 1)
    style = _style({
        "position": "relative",
        "display": "grid",
        "grid-template-columns": f"repeat({columns}, minmax(0, 1fr))",
        "gap": s.gap or "1.5rem",
        "padding": s.padding or "1rem",
        "align-items": s.align_items or "start",
    })
    # Pas de zone de drop dans une Grid : les colonnes se gèrent via le panneau
    inner = _render_sequence(el.children, ctx, None)
    return f'{_open("div", el, ctx, "canvas-grid", style)}\n{inner}{_badge(el, ctx)}\n</div>'


def render_column(el: ColumnElement, ctx: RenderContext) -> str:
    s = el.styles
    style = _style({
        "position": "relative",
        "display": "flex",
        "flex-direction": "column",
        "gap": "1rem",
        "background-color": s.background_color or "transparent",
        "padding": s.padding or "1rem",
    })
    inner = _render_sequence(el.children, ctx, el.id)
    return f'{_open("div", el, ctx, "canvas-column", style)}\n{inner}{_badge(el, ctx)}\n</div>'


# ── Feuilles ────────────────────────────────────────────────────────────────

def render_heading(el: HeadingElement, ctx: RenderContext) -> str:
    c, s = el.content, el.styles
    style = _style({
        "color": s.color or "#111827",
        "text-align": s.text_align or "left",
        "font-size": s.font_size or "2.25rem",
        "font-weight": s.font_weight or "700",
        "letter-spacing": s.letter_spacing or "normal",
        "margin": "0",
        "padding": "0.5rem 0",
    })
    tag = c.level
    return (
        f'{_open("div", el, ctx, "canvas-heading", "position:relative;width:100%")}\n'
        f'<{tag} style="{style}">{escape(c.text)}</{tag}>{_badge(el, ctx)}\n'
        f'</div>'
    )


def render_text(el: TextElement, ctx: RenderContext) -> str:
    c, s = el.content, el.styles
    style = _style({
        "color": s.color or "#4b5563",
        "text-align": s.text_align or "left",
        "font-size": s.font_size or "1rem",
        "line-height": s.line_height or "1.6",
        "margin": "0",
    })
    return (
        f'{_open("div", el, ctx, "canvas-text", "position:relative;width:100%")}\n'
        f'<p style="{style}">{escape(c.text)}</p>{_badge(el, ctx)}\n'
        f'</div>'
    )


_JUSTIFY = {"left": "flex-start", "right": "flex-end"}


def render_button(el: ButtonElement, ctx: RenderContext) -> str:
    c, s = el.content, el.styles
    wrapper = _style({
        "position": "relative",
        "width": "100%",
        "padding": "0.5rem 0",
        "display": "flex",
        "justify-content": _JUSTIFY.get(s.text_align or "center", "center"),
    })
    style = _style({
        "background-color": s.background_color or "#2563eb",
        "color": s.color or "#ffffff",
        "border-radius": s.border_radius or "0.5rem",
        "padding": s.padding or "0.75rem 1.5rem",
        "font-size": s.font_size or "0.875rem",
        "font-weight": s.font_weight or "600",
        "text-decoration": "none",
        "display": "inline-block",
    })
    return (
        f'{_open("div", el, ctx, "canvas-button", wrapper)}\n'
        f'<a href="{_attr(c.url)}" style="{style}">{escape(c.text)}</a>{_badge(el, ctx)}\n'
        f'</div>'
    )


def render_image(el: ImageElement, ctx: RenderContext) -> str:
    c, s = el.content, el.styles
    style = _style({
        "border-radius": s.border_radius or "0.75rem",
        "width": s.width or "100%",
        "max-width": s.max_width or "100%",
        "height": "auto",
        "display": "block",
        "margin": "0 auto",
    })
    return (
        f'{_open("div", el, ctx, "canvas-image", "position:relative;width:100%;padding:1rem 0")}\n'
        f'<img src="{_attr(c.src)}" alt="{_attr(c.alt)}" style="{style}">{_badge(el, ctx)}\n'
        f'</div>'
    )


# ── CSS ─────────────────────────────────────────────────────────────────────

_BASE_CSS = (
    "*,*::before,*::after{box-sizing:border-box}"
    "body{margin:0;font-family:system-ui,-apple-system,'Segoe UI',sans-serif;background:#ffffff}"
    ".canvas-root{min-height:100vh;display:flex;flex-direction:column}"
)

_EDITOR_CSS = (
    ".cb-node{cursor:pointer;transition:box-shadow .2s}"
    ".cb-node:hover{box-shadow:0 0 0 1px #93c5fd}"
    ".cb-selected{box-shadow:0 0 0 2px #3b82f6;z-index:10}"
    ".cb-badge{position:absolute;top:0;right:0;transform:translateY(-100%);background:#3b82f6;color:#fff;"
    "font-size:10px;font-weight:700;padding:2px 8px;border-radius:4px 4px 0 0}"
    ".cb-placeholder{display:flex;align-items:center;justify-content:center;min-height:60px;margin-top:1rem;"
    "border:2px dashed #e5e7eb;border-radius:12px;color:#9ca3af;font-size:10px;font-weight:700;"
    "text-transform:uppercase;letter-spacing:.05em}"
    ".cb-placeholder--empty{min-height:100px;margin-top:0}"
)
