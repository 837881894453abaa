"""Exception hierarchy for SurfaceLoops."""


class SurfaceLoopsError(Exception):
    """Base exception for all SurfaceLoops errors."""

    pass


class GeometryError(SurfaceLoopsError):
    """Errors in exact geometric constructions."""

    pass


class DegenerateSegmentError(GeometryError):
    """A segment was built from two equal points."""

    def __init__(self, point: object) -> None:
        self.point = point
        super().__init__(f"A segment cannot be empty: both ends are {point}")


class DegenerateProjectiveElementError(GeometryError):
    """A projective point or line was built from three null coordinates."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Trying to create projective {kind} from three null coordinates")


class PointAtInfinityError(GeometryError):
    """A projective point at infinity has no affine counterpart."""

    def __init__(self, point: object) -> None:
        self.point = point
        super().__init__(f"Projective point {point} is at infinity")


class PolygonError(SurfaceLoopsError):
    """Errors related to the fundamental polygon."""

    pass


class InvalidGenusError(PolygonError):
    """Genus is not a positive integer."""

    def __init__(self, genus: object) -> None:
        self.genus = genus
        super().__init__(f"Genus must be a positive integer, got {genus!r}")


class InvalidSideError(PolygonError):
    """Side or edge index outside of the polygon."""

    def __init__(self, kind: str, index: int, count: int) -> None:
        self.kind = kind
        self.index = index
        self.count = count
        super().__init__(f"{kind.capitalize()} index {index} out of range [0, {count})")


class PositionError(SurfaceLoopsError):
    """Errors related to surface positions."""

    pass


class InvalidEdgeParameterError(PositionError):
    """Edge parameter outside of the allowed open sub-range."""

    def __init__(self, parameter: object, low: object, high: object) -> None:
        self.parameter = parameter
        super().__init__(f"Position on edge {parameter} is not between {low} and {high}")


class PositionFormatError(PositionError):
    """Text could not be parsed into a position."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse '{text}': {reason}")


class LoopError(SurfaceLoopsError):
    """Errors related to loop building."""

    pass


class LoopStateError(LoopError):
    """Operation not allowed in the builder's current state."""

    def __init__(self, operation: str, state: object) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while loop is {state}")


class LoopInputError(LoopError):
    """Recoverable rejection of a user-supplied position.

    The builder state is left unchanged; callers report these as warnings.
    """

    reason: str = "Position rejected"

    def __init__(self, position: object = None) -> None:
        self.position = position
        super().__init__(self.reason)


class InvalidStartError(LoopInputError):
    """A loop must start strictly inside the polygon."""

    reason = (
        "You are currently on the edge, the first point must be placed inside the manifold"
    )


class DuplicateStartError(LoopInputError):
    """The added position equals the loop's start position."""

    reason = "You tried to add the same point twice in a row, no addition has been done"


class ConsecutiveSameEdgeError(LoopInputError):
    """Two consecutive positions on the same logical edge."""

    reason = (
        "You tried to add a point on the same edge as the previous one, "
        "please click inside the manifold and return to the edge"
    )


class OutsidePolygonError(LoopInputError):
    """A position outside of the polygon reached the session."""

    reason = "You are currently out of the manifold, click a point inside the manifold"


class LoopNotClosableError(LoopInputError):
    """The loop does not have enough segments to be closed."""

    reason = "The loop is too short to be closed"


class UnsupportedPositionError(LoopInputError):
    """A loop only goes through interior and physical side positions."""

    reason = "Loops are traced through points inside the manifold or on one of its sides"


class UnknownSideError(LoopInputError):
    """A side position refers to a side the polygon does not have."""

    reason = "This side does not exist on the current manifold"
