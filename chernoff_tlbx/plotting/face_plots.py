"""Chernoff face drawing with matplotlib."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Ellipse

from chernoff_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


logger = logging.getLogger(__name__)

FACE_ATTRIBUTES: tuple[str, ...] = (
    "face_width",
    "face_height",
    "eye_size",
    "eye_spacing",
    "pupil_position",
    "brow_slant",
    "nose_length",
    "mouth_width",
    "mouth_curvature",
)
"""Face attributes in the order feature columns are assigned to them."""


def _face_params(row: np.ndarray) -> dict[str, float]:
    """Pad/trim one scaled row to the face attributes and clip to [-1, 1]."""
    values = np.zeros(len(FACE_ATTRIBUTES))
    n = min(len(row), len(FACE_ATTRIBUTES))
    values[:n] = np.clip(row[:n], -1.0, 1.0)
    return dict(zip(FACE_ATTRIBUTES, values, strict=True))


def draw_face(ax: Axes, row: np.ndarray, *, color: object = "white", line_width: float = 1.2) -> Axes:
    """Draw a single face for one scaled feature row on ``ax``.

    Every attribute varies linearly with its value in ``[-1, 1]``; a value of 0
    gives the average face.
    """
    p = _face_params(np.asarray(row, dtype=float))
    width = 1.6 + 0.4 * p["face_width"]
    height = 2.0 + 0.4 * p["face_height"]
    ax.add_patch(Ellipse((0, 0), width, height, facecolor=color, edgecolor="black", lw=line_width))

    eye_r = 0.12 + 0.06 * p["eye_size"]
    eye_dx = 0.32 + 0.12 * p["eye_spacing"]
    eye_y = 0.25 * height / 2
    pupil_dx = 0.6 * eye_r * p["pupil_position"]
    for side in (-1, 1):
        x = side * eye_dx
        ax.add_patch(Ellipse((x, eye_y), 2 * eye_r, 1.4 * eye_r, facecolor="white", edgecolor="black", lw=line_width))
        ax.add_patch(Circle((x + pupil_dx, eye_y), 0.35 * eye_r, color="black"))
        # Brows slant inwards for positive values
        slant = 0.12 * p["brow_slant"]
        brow_y = eye_y + 1.4 * eye_r
        ax.plot([x - side * eye_r, x + side * eye_r], [brow_y + slant, brow_y - slant], color="black", lw=line_width)

    nose = 0.2 + 0.12 * p["nose_length"]
    ax.plot([0, 0], [eye_y - 0.1, eye_y - 0.1 - nose], color="black", lw=line_width)

    mouth_half = 0.3 + 0.15 * p["mouth_width"]
    mouth_y = -0.45 * height / 2
    xs = np.linspace(-mouth_half, mouth_half, 30)
    ys = mouth_y + 0.25 * p["mouth_curvature"] * ((xs / mouth_half) ** 2 - 1)
    ax.plot(xs, ys, color="black", lw=line_width)

    ax.set_xlim(-1.3, 1.3)
    ax.set_ylim(-1.3, 1.3)
    ax.set_aspect("equal")
    ax.axis("off")
    return ax


def plot_faces(
    matrix: np.ndarray,
    labels: Sequence[str] | None = None,
    *,
    ncols: int | None = None,
    title: str | None = None,
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> Figure:
    """Draw one Chernoff face per row of a scaled feature matrix.

    Columns are assigned to :data:`FACE_ATTRIBUTES` in order. Missing attributes
    stay neutral, surplus columns are ignored.

    Args:
        matrix: ``(rows, features)`` array with values in ``[-1, 1]``.
        labels: Optional title per face, aligned with ``matrix`` rows.
        ncols: Faces per grid row (defaults to a roughly square grid).
        title: Optional figure title.
        config: Plotting style.

    Returns:
        matplotlib Figure object
    """
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2:
        raise ValueError(f"matrix must be 2-dimensional, got shape {matrix.shape}")
    n_faces = matrix.shape[0]
    if n_faces == 0:
        raise ValueError("matrix has no rows to draw")
    if labels is not None and len(labels) != n_faces:
        raise ValueError(f"Got {len(labels)} labels for {n_faces} faces")
    if matrix.shape[1] > len(FACE_ATTRIBUTES):
        logger.debug("Ignoring %d surplus feature columns", matrix.shape[1] - len(FACE_ATTRIBUTES))

    ncols = ncols or math.ceil(math.sqrt(n_faces))
    nrows = math.ceil(n_faces / ncols)

    with config.apply():
        fig, axs = plt.subplots(
            nrows,
            ncols,
            figsize=(ncols * config.face_size, nrows * config.face_size),
            squeeze=False,
        )
        colors = config.colors(n_faces)
        for i, ax in enumerate(axs.flat):
            if i >= n_faces:
                ax.set_visible(False)
                continue
            draw_face(ax, matrix[i], color=colors[i], line_width=config.line_width)
            if labels is not None:
                ax.set_title(labels[i])
        if title:
            fig.suptitle(title)
        fig.tight_layout()

    return fig


@dataclass
class FaceRenderer:
    """Glyph renderer drawing a page of faces with :func:`plot_faces`.

    Example:
        >>> renderer = FaceRenderer(ncols=5)
        >>> fig = renderer(page.matrix, page.label_list)
    """

    ncols: int | None = None
    title: str | None = None
    config: PlottingConfig = field(default_factory=lambda: DEFAULT_PLOT_CFG)

    def __call__(self, matrix: np.ndarray, labels: list[str] | None) -> Figure:
        return plot_faces(matrix, labels, ncols=self.ncols, title=self.title, config=self.config)


__all__ = ["FACE_ATTRIBUTES", "FaceRenderer", "draw_face", "plot_faces"]
