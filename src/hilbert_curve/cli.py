from pathlib import Path

import matplotlib.pyplot as plt
from jsonargparse import auto_cli

from hilbert_curve.config import LARGE_CANVAS_SIZE, load_settings
from hilbert_curve.errors import HilbertCurveError
from hilbert_curve.mapper import HilbertMapper
from hilbert_curve.visualize import curve_points, plot_curve, save_points
from hilbert_curve.walk import scale_for_canvas


def main(order: int | None = None,
         index: int | None = None,
         output: str | None = None,
         plot: bool = False,
         canvas_size: int | None = None,
         large: bool = False,
         progress: bool = True) -> None:
    """Maps Hilbert curve indices to grid coordinates.

    Args:
        order: The curve order; the grid is 2^order wide. Defaults to HILBERT_ORDER.
        index: A single curve index to decode. If omitted the whole curve is computed.
        output: A CSV file, relative to ROOT_DIR, to write the curve points to.
        plot: Whether to show the curve in a matplotlib window.
        canvas_size: The canvas width used to report the drawing scale. Defaults to HILBERT_CANVAS_SIZE.
        large: Whether to use the large canvas size when canvas_size is not given.
        progress: Whether to show a progress bar while computing the curve.
    """
    settings = load_settings()
    order = settings.order if order is None else order
    if canvas_size is None:
        canvas_size = LARGE_CANVAS_SIZE if large else settings.canvas_size

    try:
        mapper = HilbertMapper(order)

        if index is not None:
            x, y = mapper.index_to_coordinate(index)
            print(f"{index} -> ({x}, {y})")
            return

        print(f"Order {mapper.order} curve: {mapper.N}x{mapper.N} grid, {mapper.num_points} points")
        print(f"Cell size on a {canvas_size}px canvas: {scale_for_canvas(order, canvas_size)}px")

        points = curve_points(order, progress=progress)

        if output is not None:
            path = save_points(points, settings.root_dir / Path(output))
            print(f"Points saved to {path}")

        if plot:
            plot_curve(order, points=points)
            plt.show()
    except HilbertCurveError as e:
        print(f"Error: {e}")
        return


def run() -> None:
    auto_cli(main)


if __name__ == "__main__":
    run()
