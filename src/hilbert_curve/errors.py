class HilbertCurveError(ValueError):
    """
    Base class for errors raised by the Hilbert curve mapping.
    """


class InvalidOrderError(HilbertCurveError):
    """
    The curve order is not an integer >= 1.
    """
    def __init__(self, order) -> None:
        super().__init__(f"Curve order must be an integer >= 1, got {order!r}")
        self.order = order


class IndexOutOfDomainError(HilbertCurveError):
    """
    The curve index falls outside [0, N^2) for the mapper's order.
    """
    def __init__(self, index, num_points: int) -> None:
        super().__init__(
            f"Curve index {index!r} is outside the curve domain [0, {num_points})"
        )
        self.index = index
        self.num_points = num_points
