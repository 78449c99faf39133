"""Exception types raised by the campus map core."""


class CampusMapError(Exception):
    """Base class for all campus map errors."""


class InvalidEndpoint(CampusMapError, KeyError):
    """A graph operation referenced a vertex that is not in the graph."""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} is not in the graph")

    def __str__(self) -> str:
        return self.args[0]


class Unreachable(CampusMapError):
    """No path connects the requested start and target."""

    def __init__(self, start, target, reason: str = "no connecting path"):
        self.start = start
        self.target = target
        super().__init__(f"Cannot route from {start!r} to {target!r}: {reason}")


class EmptyMap(CampusMapError, LookupError):
    """A query needed at least one candidate but the map has none."""


class DataLoadError(CampusMapError, ValueError):
    """Campus data is missing, malformed or references unknown locations."""
