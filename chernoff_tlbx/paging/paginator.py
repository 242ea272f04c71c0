"""Fixed-size pages over the scaled feature matrix with cursor navigation."""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import pandas as pd

from chernoff_tlbx.analysis.scaler import ScaleParameters
from chernoff_tlbx.errors import IndexOutOfRangeError


logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 25


@dataclass(frozen=True)
class Page:
    """One contiguous block of rows prepared for a single render call.

    Attributes:
        index: 0-based page number.
        start: Position of the first row (inclusive) in the full matrix.
        stop: Position after the last row (exclusive).
        features: Scaled feature rows; keeps the original row index.
        labels: Labels aligned with ``features``, or ``None``.
    """

    index: int
    start: int
    stop: int
    features: pd.DataFrame
    labels: pd.Series | None = None

    def __len__(self) -> int:
        return self.stop - self.start

    @property
    def row_positions(self) -> range:
        """Positions of this page's rows in the full dataset."""
        return range(self.start, self.stop)

    @property
    def matrix(self) -> np.ndarray:
        """Scaled features as a float array (rows x features)."""
        return self.features.to_numpy(dtype=float)

    @property
    def label_list(self) -> list[str] | None:
        return None if self.labels is None else self.labels.tolist()


class Paginator:
    """Split a scaled feature matrix into ordered pages of at most ``page_size`` rows.

    Pages are plain positional slices of the already scaled matrix; nothing is
    rescaled per page. The cursor starts on page 0. ``next()`` on the last page
    and ``previous()`` on page 0 leave it unchanged. All cursor moves go
    through one lock, so concurrent navigation commands are applied one at a time.

    Example:
        >>> pager = Paginator(scaled, labels=labels, page_size=50)
        >>> pager.page_count
        3
        >>> pager.next()
        1
        >>> pager.current_page().labels.tolist()[:2]
    """

    def __init__(
        self,
        scaled: pd.DataFrame,
        labels: pd.Series | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        scale_params: ScaleParameters | None = None,
    ) -> None:
        """Initialize the paginator.

        Args:
            scaled: Globally scaled feature matrix.
            labels: Optional labels aligned row by row with ``scaled``.
            page_size: Maximum rows per page (>= 1).
            scale_params: Parameters ``scaled`` was produced with, kept for reference.

        Raises:
            ValueError: If ``page_size`` is not a positive integer or labels are misaligned.
        """
        if isinstance(page_size, bool) or not isinstance(page_size, int | np.integer) or page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")
        if labels is not None and (len(labels) != len(scaled) or not labels.index.equals(scaled.index)):
            raise ValueError("labels must have the same length and index as the scaled feature matrix.")

        self._scaled = scaled
        self._labels = labels
        self._page_size = int(page_size)
        self._scale_params = scale_params
        self._page_count = math.ceil(len(scaled) / page_size)
        self._cursor = 0
        self._lock = threading.Lock()
        logger.debug("Paginating %d rows into %d pages of %d", len(scaled), self._page_count, page_size)

    def __len__(self) -> int:
        return self._page_count

    def __iter__(self) -> Iterator[Page]:
        return (self.get_page(i) for i in range(self._page_count))

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def row_count(self) -> int:
        return len(self._scaled)

    @property
    def scale_params(self) -> ScaleParameters | None:
        return self._scale_params

    @property
    def has_labels(self) -> bool:
        return self._labels is not None

    @property
    def current_page_index(self) -> int:
        """Index of the page under the cursor (0 when there are no pages)."""
        return self._cursor

    def get_page(self, index: int) -> Page:
        """Return page ``index``.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, page_count)``.
        """
        self._check_index(index)
        start = index * self._page_size
        stop = min(start + self._page_size, self.row_count)
        labels = None if self._labels is None else self._labels.iloc[start:stop]
        return Page(index=index, start=start, stop=stop, features=self._scaled.iloc[start:stop], labels=labels)

    def current_page(self) -> Page:
        """Return the page under the cursor.

        Raises:
            IndexOutOfRangeError: If there are no pages.
        """
        return self.get_page(self._cursor)

    def next(self) -> int:
        """Advance the cursor by one page unless it is on the last page.

        Returns:
            The cursor index after the move.
        """
        with self._lock:
            if self._cursor < self._page_count - 1:
                self._cursor += 1
            return self._cursor

    def previous(self) -> int:
        """Move the cursor back one page unless it is on page 0.

        Returns:
            The cursor index after the move.
        """
        with self._lock:
            if self._cursor > 0:
                self._cursor -= 1
            return self._cursor

    def goto_page(self, index: int) -> int:
        """Move the cursor to ``index``.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, page_count)``; the cursor is unchanged.
        """
        with self._lock:
            self._check_index(index)
            self._cursor = index
            return self._cursor

    def page_of_row(self, position: int) -> int:
        """Return the index of the page holding the row at ``position``.

        Raises:
            IndexError: If ``position`` is outside ``[0, row_count)``.
        """
        if not 0 <= position < self.row_count:
            raise IndexError(f"Row position {position} out of range [0, {self.row_count}).")
        return position // self._page_size

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int | np.integer) or not 0 <= index < self._page_count:
            raise IndexOutOfRangeError(index, self._page_count)


__all__ = ["DEFAULT_PAGE_SIZE", "Page", "Paginator"]
