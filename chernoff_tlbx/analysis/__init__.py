"""Preparation stages following the fit/result pattern."""

from .base_analyser import BaseAnalyser
from .scaler import FEATURE_RANGE, MinMaxFeatureScaler, ScaleParameters, ScalingResult, scale_features


__all__ = [
    "FEATURE_RANGE",
    "BaseAnalyser",
    "MinMaxFeatureScaler",
    "ScaleParameters",
    "ScalingResult",
    "scale_features",
]
