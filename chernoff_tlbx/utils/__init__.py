from .config import DEFAULT_PIPELINE_CFG, PipelineConfig
from .plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


__all__ = [
    "DEFAULT_PIPELINE_CFG",
    "DEFAULT_PLOT_CFG",
    "PipelineConfig",
    "PlottingConfig",
]
