"""Exceptions and warnings raised by the face preparation pipeline."""


class ChernoffError(Exception):
    """Base class for all pipeline errors."""


class MalformedColumnError(ChernoffError, ValueError):
    """A column's runtime values disagree with its classified type.

    Attributes:
        column: Name of the offending column.
        bad_values: A few example values that failed validation.
    """

    def __init__(self, column: str, message: str, bad_values: list[object] | None = None) -> None:
        self.column = column
        self.bad_values = list(bad_values or [])
        detail = f" (e.g. {self.bad_values[:5]!r})" if self.bad_values else ""
        super().__init__(f"Column '{column}': {message}{detail}")


class EmptyDatasetError(ChernoffError, ValueError):
    """The dataset has zero rows."""


class IndexOutOfRangeError(ChernoffError, IndexError):
    """A page index lies outside ``[0, page_count)``."""

    def __init__(self, index: int, page_count: int) -> None:
        self.index = index
        self.page_count = page_count
        super().__init__(f"Page index {index} out of range [0, {page_count}).")


class DegenerateColumnWarning(UserWarning):
    """A constant feature column was scaled to 0."""


__all__ = [
    "ChernoffError",
    "DegenerateColumnWarning",
    "EmptyDatasetError",
    "IndexOutOfRangeError",
    "MalformedColumnError",
]
