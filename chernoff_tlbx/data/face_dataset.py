"""Dataset facade running the face preparation pipeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from chernoff_tlbx.analysis.scaler import MinMaxFeatureScaler, ScaleParameters, ScalingResult
from chernoff_tlbx.errors import EmptyDatasetError
from chernoff_tlbx.paging.paginator import Paginator
from chernoff_tlbx.utils.config import DEFAULT_PIPELINE_CFG, PipelineConfig

from .cleaner import CleanedData, DataCleaner
from .column_classifier import ColumnClassification, ColumnClassifier
from .labels import extract_labels
from .views import FaceView


if TYPE_CHECKING:
    from chernoff_tlbx.paging.dispatcher import GlyphRenderer, RenderDispatcher


logger = logging.getLogger(__name__)


class FaceDataset:
    """Prepare a tabular dataset for paged Chernoff face rendering.

    Each stage runs at most once per dataset version and is cached:
    classification, then labels and cleaning, then global scaling. Pages
    are slices of the cached scaled matrix, so every page shares the same
    scale parameters. The wrapped DataFrame is never modified.

    **Example workflow**:
    >>> from chernoff_tlbx import FaceDataset, PipelineConfig
    >>> from chernoff_tlbx.plotting import FaceRenderer
    >>> ds = FaceDataset(df, PipelineConfig(page_size=50))
    >>> ds.classification.textual
    ['species']
    >>> pager = ds.paginate()
    >>> pager.page_count
    3
    >>> dispatcher = ds.make_dispatcher(FaceRenderer(ncols=10))
    >>> fig = dispatcher.render_next()
    """

    def __init__(self, df: pd.DataFrame, config: PipelineConfig = DEFAULT_PIPELINE_CFG) -> None:
        """Initialize the dataset.

        Args:
            df: Source data; one row per face.
            config: Pipeline settings.
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError(f"df must be a pandas DataFrame, got {type(df).__name__}")
        self._df = df
        self.config = config
        self._reset()

    @classmethod
    def from_csv(
        cls,
        filepath: str | Path,
        config: PipelineConfig = DEFAULT_PIPELINE_CFG,
        **read_csv_kwargs: object,
    ) -> FaceDataset:
        """Load a dataset from a CSV file with :func:`pandas.read_csv`.

        Args:
            filepath: Path to the CSV file
            config: Pipeline settings
            **read_csv_kwargs: Additional parameters for ``pd.read_csv``

        Returns:
            FaceDataset instance wrapping the loaded data
        """
        return cls(pd.read_csv(Path(filepath), **read_csv_kwargs), config=config)

    def with_df(self, df: pd.DataFrame) -> FaceDataset:
        """Return a new dataset (fresh caches) with the same configuration."""
        return type(self)(df, config=self.config)

    def _reset(self) -> None:
        self._classification: ColumnClassification | None = None
        self._shape: tuple[int, int] | None = None
        self._labels: pd.Series | None = None
        self._labels_ready = False
        self._cleaned: CleanedData | None = None
        self._scaling: ScalingResult | None = None

    @property
    def df(self) -> pd.DataFrame:
        """Get the source DataFrame."""
        return self._df

    @property
    def classification(self) -> ColumnClassification:
        """Column kinds, recomputed if the source columns or row count changed since the last call.

        In-place edits that keep the shape (overwriting values) are not detected;
        use :meth:`with_df` for a new version of the data.
        """
        if self._classification is not None and (
            not self._classification.matches(self._df) or self._df.shape != self._shape
        ):
            logger.debug("Dataset shape changed; discarding cached pipeline stages")
            self._reset()
        if self._classification is None:
            self._classification = ColumnClassifier(
                overrides=self.config.overrides,
                max_categorical_levels=self.config.max_categorical_levels,
            ).classify(self._df)
            self._shape = self._df.shape
        return self._classification

    @property
    def labels(self) -> pd.Series | None:
        """Row labels from textual columns; ``None`` if disabled or no textual columns exist."""
        classification = self.classification
        if not self._labels_ready:
            if self.config.extract_labels:
                self._labels = extract_labels(self._df, classification, delimiter=self.config.label_delimiter)
            self._labels_ready = True
        return self._labels

    @property
    def cleaned(self) -> CleanedData:
        """Numeric feature matrix and categorical encodings.

        Raises:
            MalformedColumnError: If a numeric column holds invalid values.
        """
        classification = self.classification
        if self._cleaned is None:
            self._cleaned = (
                DataCleaner(classification, category_order=self.config.category_order, missing=self.config.missing)
                .fit(self._df)
                .result()
            )
        return self._cleaned

    @property
    def feature_columns(self) -> list[str]:
        return self.cleaned.features.columns.tolist()

    @property
    def scaling(self) -> ScalingResult:
        """Scaled feature matrix and parameters, computed once over all rows.

        Raises:
            EmptyDatasetError: If the dataset has no rows.
        """
        cleaned = self.cleaned
        if self._scaling is None:
            self._scaling = MinMaxFeatureScaler(cleaned.features).fit().result()
        return self._scaling

    @property
    def df_scaled(self) -> pd.DataFrame:
        """Get the scaled feature matrix.

        X <- 2 * (X - min(X)) / (max(X) - min(X)) - 1
        """
        return self.scaling.scaled

    @property
    def scale_params(self) -> ScaleParameters:
        return self.scaling.params

    def get_pretty_name(self, column_name: str) -> str:
        """Capitalize and replace underscores for display."""
        return str(column_name).replace("_", " ").title()

    def view(self) -> FaceView:
        """Build an immutable view of the prepared data.

        Raises:
            EmptyDatasetError: If the dataset has no rows.
        """
        scaling = self.scaling
        return FaceView(
            scaled=scaling.scaled,
            labels=self.labels,
            params=scaling.params,
            classification=self.classification,
            pretty_by_col={col: self.get_pretty_name(col) for col in scaling.scaled.columns},
            category_codes=self.cleaned.category_codes,
        )

    def paginate(self, page_size: int | None = None) -> Paginator:
        """Split the scaled data into pages.

        An empty dataset yields a paginator with ``page_count == 0``.

        Args:
            page_size: Rows per page (defaults to ``config.page_size``)

        Returns:
            Paginator with its cursor on page 0
        """
        page_size = self.config.page_size if page_size is None else page_size
        labels = self.labels
        try:
            scaling = self.scaling
        except EmptyDatasetError:
            logger.warning("Dataset has no rows; nothing to paginate")
            return Paginator(self.cleaned.features, labels=labels, page_size=page_size)
        return Paginator(scaling.scaled, labels=labels, page_size=page_size, scale_params=scaling.params)

    def make_dispatcher(
        self,
        renderer: GlyphRenderer | None = None,
        page_size: int | None = None,
    ) -> RenderDispatcher:
        """Instantiate a render dispatcher over a fresh paginator.

        Args:
            renderer: Glyph renderer (defaults to :class:`~chernoff_tlbx.plotting.FaceRenderer`)
            page_size: Rows per page (defaults to ``config.page_size``)
        """
        from chernoff_tlbx.paging.dispatcher import RenderDispatcher

        if renderer is None:
            from chernoff_tlbx.plotting.face_plots import FaceRenderer

            renderer = FaceRenderer()
        return RenderDispatcher(self.paginate(page_size=page_size), renderer)


__all__ = ["FaceDataset"]
