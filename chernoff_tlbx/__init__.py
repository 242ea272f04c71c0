"""Data preparation and pagination for Chernoff face plots."""

from .data import ColumnClassification, ColumnClassifier, ColumnKind, DataCleaner, FaceDataset, extract_labels
from .errors import (
    ChernoffError,
    DegenerateColumnWarning,
    EmptyDatasetError,
    IndexOutOfRangeError,
    MalformedColumnError,
)
from .paging import Page, Paginator, RenderDispatcher
from .utils import PipelineConfig


__all__ = [
    "ChernoffError",
    "ColumnClassification",
    "ColumnClassifier",
    "ColumnKind",
    "DataCleaner",
    "DegenerateColumnWarning",
    "EmptyDatasetError",
    "FaceDataset",
    "IndexOutOfRangeError",
    "MalformedColumnError",
    "Page",
    "Paginator",
    "PipelineConfig",
    "RenderDispatcher",
    "extract_labels",
]
