"""Exception hierarchy for algeo."""


class AlgeoError(Exception):
    """Base exception for all algeo errors."""

    pass


class PreconditionError(AlgeoError):
    """An operation was called with arguments it is not defined for."""

    pass


class CurveIndexError(PreconditionError, IndexError):
    """Control point index outside the curve."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Index {index} out of range for curve with {count} points")


class EmptyCurveError(PreconditionError):
    """Operation requires at least one control point."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation} an empty curve")


class CurveSizeError(PreconditionError):
    """Curve has an unsupported number of control points."""

    def __init__(self, count: int, expected: str) -> None:
        self.count = count
        self.expected = expected
        super().__init__(f"Curve has {count} control points, expected {expected}")


class ScalarCastError(PreconditionError):
    """Integer cannot be represented exactly in the requested scalar type."""

    def __init__(self, value: int, scalar_type: object) -> None:
        self.value = value
        self.scalar_type = scalar_type
        name = getattr(scalar_type, "__name__", repr(scalar_type))
        super().__init__(f"Could not cast point count {value} to scalar type {name}")


class PolynomialDegreeError(PreconditionError):
    """Polynomial operation between incompatible degrees."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NumericalError(AlgeoError):
    """Errors caused by numerically degenerate input."""

    pass


class RootFindingError(NumericalError):
    """Root finder could not produce roots for a polynomial."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Root finding failed: {reason}")


class DegeneratePolynomialError(RootFindingError):
    """Polynomial is identically zero (e.g. coincident curves)."""

    def __init__(self) -> None:
        super().__init__("polynomial is identically zero")


class IOFormatError(AlgeoError):
    """Errors related to reading or writing curve files."""

    pass


class CurveFileError(IOFormatError):
    """Error loading a curve pair file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load curves from '{path}': {reason}")


class ResultSaveError(IOFormatError):
    """Error saving intersection results."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save results to '{path}': {reason}")


class ProcessingCancelledError(AlgeoError):
    """Processing was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
