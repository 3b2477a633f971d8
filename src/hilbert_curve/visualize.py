from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from tqdm.auto import tqdm

from hilbert_curve.mapper import HilbertMapper


def curve_points(order: int, progress: bool = False) -> np.ndarray:
    """Computes every point of an order `order` curve.

    :param order: The curve order.
    :param progress: Whether to show a progress bar.
    :return: An (N^2, 2) array of (x, y) rows in curve order.
    """
    mapper = HilbertMapper(order)
    coords = tqdm(mapper.coordinates(),
                  total=mapper.num_points,
                  desc=f"Order {order} curve",
                  disable=not progress)
    points = np.array(list(coords), dtype=np.int64)
    return points.reshape(-1, 2)


def curve_segments(points: np.ndarray) -> np.ndarray:
    """
    Joins consecutive points into (start, end) line segments.
    """
    if len(points) < 2:
        return np.zeros((0, 2, 2), dtype=points.dtype)
    segments = np.zeros((len(points) - 1, 2, 2), dtype=points.dtype)
    segments[:, 0, :] = points[:-1] # Start points
    segments[:, 1, :] = points[1:]  # End points
    return segments


def points_frame(points: np.ndarray) -> pd.DataFrame:
    return pd.DataFrame({
        "index": np.arange(len(points)),
        "x": points[:, 0],
        "y": points[:, 1],
    })


def save_points(points: np.ndarray, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    points_frame(points).to_csv(path, index=False)
    return path


def plot_curve(order: int,
               ax: Axes | None = None,
               cmap: str = "plasma",
               show_points: bool = True,
               progress: bool = False,
               points: np.ndarray | None = None) -> Axes:
    """Draws the curve coloured by normalized curve index.

    :param order: The curve order.
    :param ax: The axes to draw into; a new 10x10 figure is created if None.
    :param cmap: The matplotlib colormap name.
    :param show_points: Whether to scatter the visited cells as well.
    :param progress: Whether to show a progress bar while computing points.
    :param points: Precomputed points of the order `order` curve, as from curve_points.
    :return: The axes drawn into.
    """
    if points is None:
        points = curve_points(order, progress=progress)
    side_length = 2**order
    n_points = len(points)

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 10))

    colors = np.linspace(0, 1, n_points)

    if show_points:
        ax.scatter(points[:, 0], points[:, 1], c=colors, cmap=cmap, s=10, zorder=2)
    lc = LineCollection(curve_segments(points), cmap=cmap, array=colors[1:], linewidths=2)
    line = ax.add_collection(lc)

    ax.set_xlim(-0.5, side_length - 0.5)
    ax.set_ylim(-0.5, side_length - 0.5)
    ax.set_aspect("equal")
    ax.set_title(f"2D Order {order} Hilbert Curve")
    ax.set_xlabel("X Dimension")
    ax.set_ylabel("Y Dimension")
    ax.grid(True, linestyle=':', alpha=0.5)

    cbar = ax.figure.colorbar(line, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label("Normalized Hilbert Index")
    return ax
