"""Row labels built from textual columns."""

import pandas as pd

from .column_classifier import ColumnClassification


DEFAULT_LABEL_DELIMITER = ", "


def _as_text(value: object) -> str:
    return "" if pd.isna(value) else str(value)


def extract_labels(
    df: pd.DataFrame,
    classification: ColumnClassification,
    delimiter: str = DEFAULT_LABEL_DELIMITER,
) -> pd.Series | None:
    """Build one display label per row from the textual columns.

    Args:
        df: Original dataset (not modified).
        classification: Column kinds for ``df``.
        delimiter: Separator used when several textual columns are joined.

    Returns:
        String Series aligned with ``df.index``, or ``None`` if ``df`` has no
        textual columns. A single textual column is used verbatim; several are
        joined in column order. Missing values render as an empty string.
    """
    textual = classification.textual
    if not textual:
        return None

    columns = [df[col].astype(object).map(_as_text) for col in textual]
    values = [delimiter.join(parts) for parts in zip(*columns, strict=True)]
    return pd.Series(values, index=df.index, dtype=object, name="label")


__all__ = ["DEFAULT_LABEL_DELIMITER", "extract_labels"]
