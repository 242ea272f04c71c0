"""Immutable snapshot of a prepared face dataset."""

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field

import pandas as pd

from chernoff_tlbx.analysis.scaler import ScaleParameters

from .column_classifier import ColumnClassification


@dataclass(frozen=True)
class FaceView:
    """Immutable snapshot of prepared data and related metadata.

    Attributes:
        scaled: Globally scaled feature matrix; original row index.
        labels: Row labels aligned with ``scaled``, or ``None``.
        params: Scale parameters ``scaled`` was computed with.
        classification: Column kinds of the source dataset.
        pretty_by_col: Mapping from feature column names to display-friendly labels.
        category_codes: Integer codes used for each categorical column.
    """

    scaled: pd.DataFrame
    """Globally scaled feature matrix; original row index."""
    labels: pd.Series | None
    params: ScaleParameters
    classification: ColumnClassification
    pretty_by_col: Mapping[str, str] = field(default_factory=dict)
    """Mapping from feature column names to display-friendly labels."""
    category_codes: Mapping[str, Mapping[Hashable, int]] = field(default_factory=dict)

    @property
    def feature_cols(self) -> list[str]:
        return self.scaled.columns.tolist()

    @property
    def n_rows(self) -> int:
        return len(self.scaled)
