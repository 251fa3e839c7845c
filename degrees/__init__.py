"""degrees: an in-memory social graph with connectivity queries.

People are plain names; friendships are undirected. The graph answers:
- who someone's direct friends are
- how many hops separate two people (BFS)
- who is within N hops of someone
- whether everyone is reachable from everyone else

Usage:
    graph = SocialGraph()
    graph.add_person("Alice")
    graph.add_person("Bob")
    graph.connect("Alice", "Bob")
    graph.minimum_degree_of_separation("Alice", "Bob")  # 1
"""

from __future__ import annotations

from degrees.config import UNREACHABLE, GraphConfig
from degrees.errors import EmptyGraph, GraphError, PersonNotFound
from degrees.graph import SocialGraph

__version__ = "0.1.0"

__all__ = [
    "SocialGraph",
    "GraphConfig",
    "UNREACHABLE",
    "GraphError",
    "PersonNotFound",
    "EmptyGraph",
]
