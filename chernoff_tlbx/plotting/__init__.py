"""Plotting utilities for face visualization."""

from .face_plots import FACE_ATTRIBUTES, FaceRenderer, draw_face, plot_faces


__all__ = [
    "FACE_ATTRIBUTES",
    "FaceRenderer",
    "draw_face",
    "plot_faces",
]
