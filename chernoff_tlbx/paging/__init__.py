"""Pagination of scaled data and dispatch to glyph renderers."""

from .dispatcher import GlyphRenderer, RenderDispatcher
from .paginator import DEFAULT_PAGE_SIZE, Page, Paginator


__all__ = ["DEFAULT_PAGE_SIZE", "GlyphRenderer", "Page", "Paginator", "RenderDispatcher"]
