"""Pipeline settings shared by the preparation stages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from chernoff_tlbx.data.column_classifier import ColumnKind


@dataclass(frozen=True)
class PipelineConfig:
    """Settings for classification, cleaning and pagination.

    Attributes:
        page_size: Maximum number of faces per page. Small enough that one
            page renders at interactive speed.
        extract_labels: Build row labels from textual columns.
        label_delimiter: Separator between joined textual values.
        category_order: Rule for categorical codes ("sorted" or "first_seen").
        missing: Handling of missing numeric values ("raise" or "median").
        max_categorical_levels: Opt-in threshold for treating repeating text as categorical.
        overrides: Explicit column kinds, taking precedence over dtypes.
    """

    page_size: int = 25
    extract_labels: bool = True
    label_delimiter: str = ", "
    category_order: Literal["sorted", "first_seen"] = "sorted"
    missing: Literal["raise", "median"] = "raise"
    max_categorical_levels: int | None = None
    overrides: Mapping[str, ColumnKind | str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int | np.integer) or self.page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size!r}")
        if self.category_order not in ("sorted", "first_seen"):
            raise ValueError(f"Invalid category_order='{self.category_order}'. Use 'sorted' or 'first_seen'.")
        if self.missing not in ("raise", "median"):
            raise ValueError(f"Invalid missing='{self.missing}'. Use 'raise' or 'median'.")
        if self.max_categorical_levels is not None and self.max_categorical_levels < 1:
            raise ValueError("max_categorical_levels must be a positive integer or None.")
        object.__setattr__(self, "page_size", int(self.page_size))
        # Validates kinds early; ColumnKind raises ValueError for unknown names
        object.__setattr__(self, "overrides", {col: ColumnKind(kind) for col, kind in self.overrides.items()})


DEFAULT_PIPELINE_CFG = PipelineConfig()


__all__ = ["DEFAULT_PIPELINE_CFG", "PipelineConfig"]
