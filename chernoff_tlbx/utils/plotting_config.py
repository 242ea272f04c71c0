"""Shared plotting configuration (style, palette, font sizes) for face plots."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import matplotlib as mpl
import seaborn as sns


@dataclass
class PlottingConfig:
    """Reusable plotting style that can be applied across face figures."""

    style: str = "white"
    palette: str | list[str] = "pastel"
    font_family: str = "DejaVu Sans"
    font_scale: float = 1.0
    title_size: int = 14
    label_size: int = 9
    figure_dpi: int = 100
    context: str = "notebook"
    face_size: float = 1.6
    """Width/height in inches reserved for one face."""
    line_width: float = 1.2
    seaborn_kwargs: dict[str, Any] = field(default_factory=dict)

    def colors(self, n: int) -> list[tuple[float, float, float]]:
        """Return ``n`` fill colors from the configured palette."""
        return list(sns.color_palette(self.palette, n_colors=max(n, 1)))

    def _rc_params(self) -> dict[str, Any]:
        return {
            "axes.titlesize": self.label_size,
            "figure.titlesize": self.title_size,
            "figure.dpi": self.figure_dpi,
            "lines.linewidth": self.line_width,
            "font.family": [self.font_family],
        }

    def apply_global(self) -> None:
        """Apply plotting style globally (no automatic restore).

        For temporary styling (with automatic restoration), use
        :meth:`apply` instead.
        """
        sns.set_theme(style=self.style, context=self.context, font_scale=self.font_scale, **self.seaborn_kwargs)
        mpl.rcParams.update(self._rc_params())

    @contextmanager
    def apply(self) -> Generator[None]:
        """Apply style within a context, restoring previous rcParams afterwards."""
        with mpl.rc_context():
            sns.set_theme(style=self.style, context=self.context, font_scale=self.font_scale, **self.seaborn_kwargs)
            mpl.rcParams.update(self._rc_params())
            yield


# Default configuration used across plotting functions
DEFAULT_PLOT_CFG = PlottingConfig()


__all__ = ["DEFAULT_PLOT_CFG", "PlottingConfig"]
