"""Exceptions raised by the social graph."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for social graph errors."""
    pass


class PersonNotFound(GraphError, KeyError):
    """Raised when an operation names a person who is not in the graph."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is not found in the social network")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.args[0]


class EmptyGraph(GraphError):
    """Raised by strict connectivity checks on a graph with no people."""
    pass
