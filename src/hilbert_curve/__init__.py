from hilbert_curve.errors import HilbertCurveError, IndexOutOfDomainError, InvalidOrderError
from hilbert_curve.mapper import HilbertMapper
from hilbert_curve.walk import CurveWalker, Segment, scale_for_canvas

__all__ = [
    "CurveWalker",
    "HilbertCurveError",
    "HilbertMapper",
    "IndexOutOfDomainError",
    "InvalidOrderError",
    "Segment",
    "scale_for_canvas",
]
