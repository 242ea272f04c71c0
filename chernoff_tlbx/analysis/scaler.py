"""Global min-max scaling of the feature matrix onto ``[-1, 1]``."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.preprocessing import MinMaxScaler

from chernoff_tlbx.errors import DegenerateColumnWarning, EmptyDatasetError, MalformedColumnError

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)

FEATURE_RANGE: tuple[float, float] = (-1.0, 1.0)


@dataclass(frozen=True)
class ScaleParameters:
    """Per-column observed range of the full feature matrix.

    Attributes:
        data_min: Column minima, indexed by feature name.
        data_max: Column maxima, indexed by feature name.
        n_samples: Number of rows the parameters were computed from.
        feature_range: Target interval ``(lower, upper)`` of the scaled values.
    """

    data_min: pd.Series
    data_max: pd.Series
    n_samples: int
    feature_range: tuple[float, float] = FEATURE_RANGE

    @property
    def columns(self) -> list[str]:
        return self.data_min.index.tolist()

    @property
    def data_range(self) -> pd.Series:
        """Column ``max - min``; ``inf`` where the difference overflows."""
        return self.data_max - self.data_min

    @property
    def degenerate_columns(self) -> list[str]:
        """Constant columns, scaled to the middle of ``feature_range`` for every row."""
        return self.data_range[self.data_range == 0].index.tolist()

    def transform(self, features: pd.DataFrame) -> pd.DataFrame:
        r"""Rescale ``features`` with the stored parameters.

        :math:`v \mapsto 2 (v - \min) / (\max - \min) - 1`; degenerate columns map to 0.
        Values outside the stored range are not clipped.

        Raises:
            ValueError: If ``features`` does not have the parameter columns in order.
        """
        if features.columns.tolist() != self.columns:
            raise ValueError(
                f"Feature columns {features.columns.tolist()} do not match scale parameters {self.columns}.",
            )
        lower, upper = self.feature_range
        span = self.data_range
        # Columns whose max - min overflows are scaled on halved values
        factor = pd.Series(np.where(np.isinf(span), 0.5, 1.0), index=span.index)
        low = self.data_min * factor
        high = self.data_max * factor
        unit = features.mul(factor, axis=1).sub(low, axis=1).div((high - low).where(span != 0), axis=1)
        scaled = unit * (upper - lower) + lower
        degenerate = self.degenerate_columns
        if degenerate:
            scaled.loc[:, degenerate] = (lower + upper) / 2
        return scaled.astype(float)


@dataclass(frozen=True)
class ScalingResult:
    """Scaled feature matrix plus the parameters that produced it."""

    scaled: pd.DataFrame
    params: ScaleParameters


class MinMaxFeatureScaler(BaseAnalyser):
    """Scale every feature column onto ``[-1, 1]`` using the whole dataset.

    The parameters are fitted once, before any pagination, with
    [sklearn's MinMaxScaler](https://scikit-learn.org/stable/modules/generated/sklearn.preprocessing.MinMaxScaler.html),
    so a value sits at the same position on every page. Constant columns scale
    to 0 and trigger a :class:`~chernoff_tlbx.errors.DegenerateColumnWarning`.

    Example:
        >>> result = MinMaxFeatureScaler(cleaned.features).fit().result()
        >>> result.scaled.min().min(), result.scaled.max().max()
        (-1.0, 1.0)
    """

    def __init__(self, features: pd.DataFrame) -> None:
        """Initialize the scaler with the complete feature matrix."""
        self._features = features
        self._model: MinMaxScaler | None = None
        self._result: ScalingResult | None = None

    def fit(self) -> MinMaxFeatureScaler:
        """Compute the scale parameters and the scaled matrix.

        Raises:
            EmptyDatasetError: If the feature matrix has no rows.
            MalformedColumnError: If a feature column holds missing values.
        """
        features = self._features
        if len(features) == 0:
            raise EmptyDatasetError("Cannot compute scale parameters for a dataset with zero rows.")

        missing = [col for col in features.columns if features[col].isna().any()]
        if missing:
            raise MalformedColumnError(missing[0], "feature matrix holds missing values")

        if features.shape[1] == 0:
            empty = pd.Series(dtype=float)
            params = ScaleParameters(data_min=empty, data_max=empty, n_samples=len(features))
        else:
            self._model = MinMaxScaler(feature_range=FEATURE_RANGE).fit(features.to_numpy(dtype=float))
            params = ScaleParameters(
                data_min=pd.Series(self._model.data_min_, index=features.columns, dtype=float),
                data_max=pd.Series(self._model.data_max_, index=features.columns, dtype=float),
                n_samples=int(self._model.n_samples_seen_),
                feature_range=self._model.feature_range,
            )

        degenerate = params.degenerate_columns
        if degenerate:
            msg = f"Constant feature columns {degenerate} are scaled to 0."
            logger.warning(msg)
            warnings.warn(msg, DegenerateColumnWarning, stacklevel=2)

        self._result = ScalingResult(scaled=params.transform(features), params=params)
        logger.debug("Fitted scale parameters on %d rows x %d columns", *features.shape)
        return self

    @property
    def model(self) -> MinMaxScaler:
        """Return the fitted scikit-learn scaler."""
        if self._model is None:
            raise ValueError("Scaler not fitted. Call fit() first.")
        return self._model

    def result(self) -> ScalingResult:
        """Return the scaled matrix and its parameters.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._result is None:
            raise ValueError("Must call fit() before result()")
        return self._result


def scale_features(features: pd.DataFrame) -> ScalingResult:
    """Shortcut for ``MinMaxFeatureScaler(features).fit().result()``."""
    return MinMaxFeatureScaler(features).fit().result()


__all__ = ["FEATURE_RANGE", "MinMaxFeatureScaler", "ScaleParameters", "ScalingResult", "scale_features"]
