"""Data module: column classification, labels, cleaning and the dataset facade."""

from .column_classifier import ColumnClassification, ColumnClassifier, ColumnKind, classify_columns
from .labels import extract_labels
from .cleaner import CleanedData, DataCleaner
from .views import FaceView
from .face_dataset import FaceDataset


__all__ = [
    "CleanedData",
    "ColumnClassification",
    "ColumnClassifier",
    "ColumnKind",
    "DataCleaner",
    "FaceDataset",
    "FaceView",
    "classify_columns",
    "extract_labels",
]
