"""Tests for RenderDispatcher."""

import numpy as np
import pandas as pd
import pytest

from chernoff_tlbx.errors import IndexOutOfRangeError
from chernoff_tlbx.paging.dispatcher import RenderDispatcher
from chernoff_tlbx.paging.paginator import Paginator


class RecordingRenderer:
    """Renderer stub that records its arguments and returns a sentinel."""

    def __init__(self) -> None:
        self.calls: list[tuple[np.ndarray, list[str] | None]] = []
        self.artifact = object()

    def __call__(self, matrix: np.ndarray, labels: list[str] | None) -> object:
        self.calls.append((matrix, labels))
        return self.artifact


@pytest.fixture
def pager() -> Paginator:
    """Paginator over 7 labelled rows with page size 3."""
    scaled = pd.DataFrame({"a": np.linspace(-1, 1, 7), "b": np.zeros(7)})
    labels = pd.Series([f"r{i}" for i in range(7)])
    return Paginator(scaled, labels=labels, page_size=3)


class TestRenderDispatcher:
    """Test argument marshaling to the renderer."""

    def test_render_passes_matrix_and_labels(self, pager: Paginator) -> None:
        """Test the renderer receives the page's array and label list."""
        renderer = RecordingRenderer()
        artifact = RenderDispatcher(pager, renderer).render(2)

        assert artifact is renderer.artifact
        matrix, labels = renderer.calls[0]
        assert isinstance(matrix, np.ndarray)
        assert matrix.shape == (1, 2)
        assert labels == ["r6"]

    def test_render_without_labels(self) -> None:
        """Test labels are passed as None when absent."""
        renderer = RecordingRenderer()
        pager = Paginator(pd.DataFrame({"a": [0.0, 1.0]}), page_size=5)
        RenderDispatcher(pager, renderer).render_current()

        assert renderer.calls[0][1] is None

    def test_render_does_not_move_cursor(self, pager: Paginator) -> None:
        """Test render(i) is random access."""
        RenderDispatcher(pager, RecordingRenderer()).render(1)
        assert pager.current_page_index == 0

    def test_render_next_and_previous(self, pager: Paginator) -> None:
        """Test navigation helpers move the cursor and render the new page."""
        renderer = RecordingRenderer()
        dispatcher = RenderDispatcher(pager, renderer)

        dispatcher.render_next()
        dispatcher.render_next()
        dispatcher.render_next()
        dispatcher.render_previous()

        assert [labels[0] for _, labels in renderer.calls] == ["r3", "r6", "r6", "r3"]
        assert pager.current_page_index == 1

    def test_render_out_of_range(self, pager: Paginator) -> None:
        """Test invalid indices surface before the renderer is called."""
        renderer = RecordingRenderer()
        with pytest.raises(IndexOutOfRangeError):
            RenderDispatcher(pager, renderer).render(5)
        assert renderer.calls == []

    def test_renderer_must_be_callable(self, pager: Paginator) -> None:
        """Test non-callables are rejected."""
        with pytest.raises(TypeError, match="callable"):
            RenderDispatcher(pager, "not a renderer")  # type: ignore[arg-type]

    def test_plain_function_renderer(self, pager: Paginator) -> None:
        """Test any callable following the protocol works."""
        dispatcher = RenderDispatcher(pager, lambda matrix, labels: (matrix.sum(), labels))
        total, labels = dispatcher.render(0)

        assert labels == ["r0", "r1", "r2"]
        assert total == pytest.approx(pager.get_page(0).matrix.sum())
