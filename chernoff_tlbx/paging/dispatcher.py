"""Hand pages over to an external glyph renderer."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import numpy as np

from .paginator import Page, Paginator


logger = logging.getLogger(__name__)


class GlyphRenderer(Protocol):
    """Anything that turns a scaled feature matrix (and optional labels) into a drawing."""

    def __call__(self, matrix: np.ndarray, labels: list[str] | None) -> Any: ...


class RenderDispatcher:
    """Fetch pages from a :class:`Paginator` and pass them to a renderer.

    The renderer receives the page's scaled values as a ``(rows, features)``
    float array and its labels as a list (or ``None``). Its return value is
    handed back untouched.

    Example:
        >>> from chernoff_tlbx.plotting import FaceRenderer
        >>> dispatcher = RenderDispatcher(pager, FaceRenderer())
        >>> fig = dispatcher.render_current()
        >>> fig = dispatcher.render_next()
    """

    def __init__(self, paginator: Paginator, renderer: GlyphRenderer) -> None:
        if not callable(renderer):
            raise TypeError(f"renderer must be callable, got {type(renderer).__name__}")
        self.paginator = paginator
        self.renderer = renderer

    def render_page(self, page: Page) -> Any:
        """Render an already fetched page."""
        logger.debug("Rendering page %d (rows %d-%d)", page.index, page.start, page.stop)
        return self.renderer(page.matrix, page.label_list)

    def render(self, index: int) -> Any:
        """Render page ``index`` without moving the cursor.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, page_count)``.
        """
        return self.render_page(self.paginator.get_page(index))

    def render_current(self) -> Any:
        return self.render_page(self.paginator.current_page())

    def render_next(self) -> Any:
        """Advance the cursor (no-op on the last page) and render the page under it."""
        return self.render(self.paginator.next())

    def render_previous(self) -> Any:
        """Step the cursor back (no-op on page 0) and render the page under it."""
        return self.render(self.paginator.previous())


__all__ = ["GlyphRenderer", "RenderDispatcher"]
