"""Renderer HTML dual-mode (editable / live)."""
from .base import RenderMode, RenderContext
from .html import render_elements, render_element, render_page

__all__ = ["RenderMode", "RenderContext", "render_elements", "render_element", "render_page"]
