"""Column classification into textual, categorical and numeric kinds."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

import pandas as pd

from chernoff_tlbx.errors import MalformedColumnError


logger = logging.getLogger(__name__)


class ColumnKind(StrEnum):
    """Semantic kind of a dataset column."""

    TEXTUAL = "textual"
    """Free text; becomes part of the row label, never a feature."""
    CATEGORICAL = "categorical"
    """Bounded set of discrete labels; encoded as integer codes starting at 1."""
    NUMERIC = "numeric"
    """Numeric values; kept unchanged as features."""


@dataclass(frozen=True)
class ColumnClassification:
    """Immutable mapping from column name to :class:`ColumnKind`.

    Attributes:
        kinds: Ordered mapping in the dataset's column order.
    """

    kinds: Mapping[str, ColumnKind] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kinds", MappingProxyType(dict(self.kinds)))

    @property
    def columns(self) -> list[str]:
        """All classified columns in dataset order."""
        return list(self.kinds)

    @property
    def textual(self) -> list[str]:
        return self._of(ColumnKind.TEXTUAL)

    @property
    def categorical(self) -> list[str]:
        return self._of(ColumnKind.CATEGORICAL)

    @property
    def numeric(self) -> list[str]:
        return self._of(ColumnKind.NUMERIC)

    def kind_of(self, column: str) -> ColumnKind:
        """Return the kind of ``column``.

        Raises:
            KeyError: If the column was not classified.
        """
        return self.kinds[column]

    def matches(self, df: pd.DataFrame) -> bool:
        """Check whether this classification still describes ``df``'s columns."""
        return list(df.columns) == self.columns

    def _of(self, kind: ColumnKind) -> list[str]:
        return [col for col, k in self.kinds.items() if k == kind]


class ColumnClassifier:
    """Classify every column of a DataFrame from its declared dtype.

    Rules:
        - ``bool`` and ``pandas.CategoricalDtype`` columns are categorical.
        - Other numeric dtypes are numeric.
        - ``object``/``string`` columns are textual. Their content is never
          parsed, so ``"1.5"`` stays textual unless pre-typed via ``overrides``.
        - With ``max_categorical_levels`` set, a textual column whose values
          repeat and take at most that many distinct values is categorical.

    Example:
        >>> classifier = ColumnClassifier(overrides={"zip_code": "textual"})
        >>> classification = classifier.classify(df)
        >>> classification.numeric
    """

    def __init__(
        self,
        overrides: Mapping[str, ColumnKind | str] | None = None,
        max_categorical_levels: int | None = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            overrides: Explicit kinds for selected columns, taking precedence over dtype rules.
            max_categorical_levels: Opt-in threshold for treating repeating text as categorical.
        """
        if max_categorical_levels is not None and max_categorical_levels < 1:
            raise ValueError("max_categorical_levels must be a positive integer or None.")
        self.overrides = {col: ColumnKind(kind) for col, kind in (overrides or {}).items()}
        self.max_categorical_levels = max_categorical_levels

    def classify(self, df: pd.DataFrame) -> ColumnClassification:
        """Classify all columns of ``df``.

        Raises:
            KeyError: If an override names a column missing from ``df``.
            MalformedColumnError: If a column has a dtype with no supported kind.
        """
        unknown = [col for col in self.overrides if col not in df.columns]
        if unknown:
            raise KeyError(f"Overrides reference unknown columns: {unknown}")

        kinds = {col: self.overrides.get(col) or self._classify_series(col, df[col]) for col in df.columns}
        classification = ColumnClassification(kinds)
        logger.debug(
            "Classified %d columns: %d textual, %d categorical, %d numeric",
            len(kinds),
            len(classification.textual),
            len(classification.categorical),
            len(classification.numeric),
        )
        return classification

    def _classify_series(self, name: str, series: pd.Series) -> ColumnKind:
        dtype = series.dtype
        if isinstance(dtype, pd.CategoricalDtype) or pd.api.types.is_bool_dtype(dtype):
            return ColumnKind.CATEGORICAL
        if pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_complex_dtype(dtype):
            return ColumnKind.NUMERIC
        if pd.api.types.is_object_dtype(dtype) or pd.api.types.is_string_dtype(dtype):
            if self._looks_categorical(series):
                return ColumnKind.CATEGORICAL
            return ColumnKind.TEXTUAL
        raise MalformedColumnError(str(name), f"unsupported dtype '{dtype}'; pass an explicit override")

    def _looks_categorical(self, series: pd.Series) -> bool:
        if self.max_categorical_levels is None:
            return False
        values = series.dropna()
        n_unique = values.nunique()
        return 0 < n_unique <= self.max_categorical_levels and n_unique < len(values)


def classify_columns(df: pd.DataFrame, **kwargs: object) -> ColumnClassification:
    """Shortcut for ``ColumnClassifier(**kwargs).classify(df)``."""
    return ColumnClassifier(**kwargs).classify(df)  # type: ignore[arg-type]


__all__ = ["ColumnClassification", "ColumnClassifier", "ColumnKind", "classify_columns"]
