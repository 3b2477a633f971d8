import operator
from dataclasses import dataclass
from typing import Iterator

from hilbert_curve.errors import IndexOutOfDomainError, InvalidOrderError

# Coordinates of the order 1 curve (N = 2), indexed by the last two bits:
# bottom-left, top-left, top-right, bottom-right.
ORDER1_COORDS = (
    (0, 0),
    (0, 1),
    (1, 1),
    (1, 0),
)


def as_int(value) -> int | None:
    """
    The value as a plain int if it is an integer type (numpy integers
    included, bools excluded), otherwise None.
    """
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def _last2bits(x: int) -> int:
    return x & 3


@dataclass(frozen=True)
class HilbertMapper:
    """
    Maps indices along a Hilbert curve of a fixed order to (x, y) cells of
    an N x N grid, N = 2^order.

    The mapping is iterative: the last two bits of the index pick a cell of
    the order 1 curve, then each following pair of bits embeds the curve
    built so far into one quadrant of a curve twice the size.
    """
    order: int

    def __post_init__(self) -> None:
        order = as_int(self.order)
        if order is None or order < 1:
            raise InvalidOrderError(self.order)
        object.__setattr__(self, "order", order)

    @property
    def N(self) -> int:
        return 2**self.order

    @property
    def side_length(self) -> int:
        return self.N

    @property
    def num_points(self) -> int:
        return self.N * self.N

    def __len__(self) -> int:
        return self.num_points

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return self.coordinates()

    def index_to_coordinate(self, index: int) -> tuple[int, int]:
        """Decodes a curve index into (x, y) grid coordinates.

        :param index: The position along the curve, in [0, N^2).
        :return: The (x, y) cell visited at that position.
        :raises IndexOutOfDomainError: If index is not an integer in [0, N^2).
        """
        value = as_int(index)
        if value is None or value < 0 or value >= self.num_points:
            raise IndexOutOfDomainError(index, self.num_points)
        index = value

        x, y = ORDER1_COORDS[_last2bits(index)]
        index >>= 2

        n = 4
        while n <= self.N:
            half_n = n // 2
            quadrant = _last2bits(index)
            if quadrant == 0:
                # Bottom-left: the sub-curve is reflected about the diagonal.
                x, y = y, x
            elif quadrant == 1:
                y += half_n
            elif quadrant == 2:
                x += half_n
                y += half_n
            else:
                # Bottom-right: reflect about the anti-diagonal, then move right.
                x, y = (half_n - 1) - y, (half_n - 1) - x
                x += half_n
            index >>= 2
            n *= 2

        return x, y

    def coordinates(self,
                    start: int = 0,
                    stop: int | None = None) -> Iterator[tuple[int, int]]:
        """Yields the coordinates for indices in [start, stop).

        :param start: The first index to decode.
        :param stop: One past the last index; defaults to N^2.
        :return: A generator of (x, y) tuples in curve order.
        """
        if stop is None:
            stop = self.num_points
        first, last = as_int(start), as_int(stop)
        if first is None or first < 0 or first > self.num_points:
            raise IndexOutOfDomainError(start, self.num_points)
        if last is None or last < first or last > self.num_points:
            raise IndexOutOfDomainError(stop, self.num_points)
        return (self.index_to_coordinate(i) for i in range(first, last))
