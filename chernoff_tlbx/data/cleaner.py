"""Conversion of a classified dataset into a purely numeric feature matrix."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Literal

import numpy as np
import pandas as pd
from sklearn.impute import SimpleImputer

from chernoff_tlbx.analysis.base_analyser import BaseAnalyser
from chernoff_tlbx.errors import MalformedColumnError

from .column_classifier import ColumnClassification, ColumnKind


logger = logging.getLogger(__name__)

CategoryOrder = Literal["sorted", "first_seen"]
MissingStrategy = Literal["raise", "median"]

UNLABELED_CODE = 0
"""Code assigned to missing categorical values; real categories start at 1."""


@dataclass(frozen=True)
class CleanedData:
    """Output of :class:`DataCleaner`.

    Attributes:
        features: Float DataFrame with the original row index; textual columns removed,
            categorical columns replaced by integer codes, numeric columns unchanged.
        category_codes: Per categorical column, the mapping ``category -> code``.
        dropped_columns: Textual columns left out of ``features``.
        imputed_columns: Numeric columns whose missing values were median-imputed.
    """

    features: pd.DataFrame
    category_codes: Mapping[str, Mapping[Hashable, int]] = field(default_factory=dict)
    dropped_columns: tuple[str, ...] = ()
    imputed_columns: tuple[str, ...] = ()

    def decode(self, column: str, code: int) -> Hashable | None:
        """Map an integer code of a categorical column back to its category.

        Returns ``None`` for the unlabeled code.
        """
        if code == UNLABELED_CODE:
            return None
        for category, value in self.category_codes[column].items():
            if value == code:
                return category
        raise KeyError(f"Code {code} unknown for column '{column}'")


class DataCleaner(BaseAnalyser):
    """Build the numeric feature matrix from a dataset and its classification.

    Categorical encoding is computed over the full dataset, so codes are
    stable across pages. With ``category_order="sorted"`` the codes follow the
    declared category order of ``pandas.Categorical`` columns and the sorted
    distinct values otherwise; ``"first_seen"`` numbers categories in order of
    first appearance. Codes start at 1, missing values get code 0.

    Example:
        >>> classification = ColumnClassifier().classify(df)
        >>> cleaned = DataCleaner(classification).fit(df).result()
        >>> cleaned.features.columns.tolist()
    """

    def __init__(
        self,
        classification: ColumnClassification,
        category_order: CategoryOrder = "sorted",
        missing: MissingStrategy = "raise",
    ) -> None:
        """Initialize the cleaner.

        Args:
            classification: Column kinds of the dataset to clean.
            category_order: Rule for assigning categorical codes ("sorted" or "first_seen").
            missing: "raise" rejects missing numeric values, "median" imputes the global column median.
        """
        if category_order not in ("sorted", "first_seen"):
            raise ValueError(f"Invalid category_order='{category_order}'. Use 'sorted' or 'first_seen'.")
        if missing not in ("raise", "median"):
            raise ValueError(f"Invalid missing='{missing}'. Use 'raise' or 'median'.")
        self.classification = classification
        self.category_order = category_order
        self.missing = missing
        self._result: CleanedData | None = None

    def fit(self, df: pd.DataFrame) -> DataCleaner:
        """Clean ``df`` (which is left untouched).

        Raises:
            ValueError: If the classification does not describe ``df``'s columns.
            MalformedColumnError: If a numeric column holds non-numeric, infinite or
                (with ``missing="raise"``) missing values.
        """
        if not self.classification.matches(df):
            raise ValueError("Column classification does not match the dataset columns; classify again.")

        columns: dict[str, pd.Series] = {}
        category_codes: dict[str, dict[Hashable, int]] = {}
        for col in df.columns:
            kind = self.classification.kind_of(col)
            if kind == ColumnKind.TEXTUAL:
                continue
            if kind == ColumnKind.CATEGORICAL:
                mapping = self._category_mapping(df[col])
                category_codes[col] = mapping
                columns[col] = self._encode(df[col], mapping)
            else:
                columns[col] = self._coerce_numeric(col, df[col])

        features = pd.DataFrame(columns, index=df.index, columns=list(columns), dtype=float)
        features, imputed = self._resolve_missing(features, self.classification.numeric)

        self._result = CleanedData(
            features=features,
            category_codes=category_codes,
            dropped_columns=tuple(self.classification.textual),
            imputed_columns=tuple(imputed),
        )
        logger.debug(
            "Cleaned %d rows into %d feature columns (dropped %s)",
            len(features),
            features.shape[1],
            self.classification.textual,
        )
        return self

    def result(self) -> CleanedData:
        """Return the cleaned data.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._result is None:
            raise ValueError("Must call fit() before result()")
        return self._result

    def _category_mapping(self, series: pd.Series) -> dict[Hashable, int]:
        if self.category_order == "sorted" and isinstance(series.dtype, pd.CategoricalDtype):
            categories = list(series.cat.categories)
        elif self.category_order == "sorted":
            distinct = list(pd.unique(series.dropna()))
            try:
                categories = sorted(distinct)
            except TypeError:
                categories = sorted(distinct, key=str)
        else:
            categories = list(pd.unique(series.dropna().astype(object)))
        return {category: code for code, category in enumerate(categories, start=UNLABELED_CODE + 1)}

    @staticmethod
    def _encode(series: pd.Series, mapping: Mapping[Hashable, int]) -> pd.Series:
        return series.astype(object).map(mapping).astype(float).fillna(UNLABELED_CODE)

    @staticmethod
    def _coerce_numeric(col: str, series: pd.Series) -> pd.Series:
        if pd.api.types.is_numeric_dtype(series.dtype) and not isinstance(series.dtype, pd.CategoricalDtype):
            values = series.astype(float)
        else:
            values = pd.to_numeric(series.astype(object), errors="coerce").astype(float)
            bad = series[values.isna() & series.notna()]
            if not bad.empty:
                raise MalformedColumnError(col, "declared numeric but holds non-numeric values", bad.unique().tolist())

        infinite = values[np.isinf(values)]
        if not infinite.empty:
            raise MalformedColumnError(col, "holds infinite values", infinite.unique().tolist())
        return values

    def _resolve_missing(self, features: pd.DataFrame, numeric_cols: list[str]) -> tuple[pd.DataFrame, list[str]]:
        with_missing = [col for col in numeric_cols if features[col].isna().any()]
        if not with_missing:
            return features, []

        if self.missing == "raise":
            col = with_missing[0]
            n_missing = int(features[col].isna().sum())
            raise MalformedColumnError(col, f"{n_missing} missing values; use missing='median' to impute")

        empty = [col for col in with_missing if features[col].isna().all()]
        if empty:
            raise MalformedColumnError(empty[0], "holds no values to impute from")

        # Global median, computed over all rows before any paging
        imputed = features.copy()
        imputed[with_missing] = SimpleImputer(strategy="median").fit_transform(features[with_missing])
        logger.warning("Median-imputed missing values in columns %s", with_missing)
        return imputed, with_missing


__all__ = ["UNLABELED_CODE", "CleanedData", "DataCleaner"]
