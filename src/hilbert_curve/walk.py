from typing import Iterator, NamedTuple

from hilbert_curve.errors import HilbertCurveError, IndexOutOfDomainError
from hilbert_curve.mapper import HilbertMapper, as_int

MIN_CELL_SIZE = 4


class Segment(NamedTuple):
    index: int
    start: tuple[int, int]
    end: tuple[int, int]


def scale_for_canvas(order: int, canvas_size: int) -> int:
    """
    The length of one curve step when an order `order` curve fills a square
    canvas `canvas_size` wide. Never smaller than MIN_CELL_SIZE.
    """
    if as_int(canvas_size) is None or canvas_size < 1:
        raise HilbertCurveError(f"Canvas size must be positive, got {canvas_size}")
    return max(MIN_CELL_SIZE, as_int(canvas_size) // HilbertMapper(order).N)


class CurveWalker:
    """
    Steps along a Hilbert curve one index at a time, producing the line
    segment joining each point to the one before it.

    The walker owns all traversal state (current index, previous point and
    the stop flag) so any drawing loop can drive it at its own pace.
    """

    def __init__(self, mapper: HilbertMapper, start: int = 1, scale: int = 1) -> None:
        first = as_int(start)
        if first is None or first < 0 or first > mapper.num_points:
            raise IndexOutOfDomainError(start, mapper.num_points)
        if as_int(scale) is None or scale < 1:
            raise HilbertCurveError(f"Scale must be an integer >= 1, got {scale!r}")
        self.mapper = mapper
        self.scale = as_int(scale)
        self.index = first
        self.previous = (0, 0) if first == 0 else self._scaled(first - 1)
        self.stopped = False

    def _scaled(self, index: int) -> tuple[int, int]:
        x, y = self.mapper.index_to_coordinate(index)
        return x * self.scale, y * self.scale

    @property
    def done(self) -> bool:
        return self.stopped or self.index >= self.mapper.num_points

    def stop(self) -> None:
        self.stopped = True

    def step(self) -> Segment | None:
        if self.done:
            return None
        current = self._scaled(self.index)
        segment = Segment(self.index, self.previous, current)
        self.previous = current
        self.index += 1
        return segment

    def __iter__(self) -> Iterator[Segment]:
        while (segment := self.step()) is not None:
            yield segment
