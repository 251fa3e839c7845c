"""Social graph: people, friendships, and connectivity queries.

An undirected graph keyed by name. Each person maps to the set of names
they are friends with; every mutation keeps that relation symmetric.
Traversal queries (degree of separation, friends within N hops, whole-graph
connectivity) are breadth-first searches over the adjacency sets.

The graph owns its mapping and does no locking. Callers sharing an instance
across threads must serialize access themselves.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator

from loguru import logger

from degrees.config import GraphConfig
from degrees.errors import EmptyGraph, PersonNotFound


class SocialGraph:
    """Undirected friendship graph over unique, case-sensitive names.

    Edges can only be added (connect) or dropped as a side effect of
    removing a person. There is no standalone unfriend operation.
    """

    def __init__(self, config: GraphConfig | None = None) -> None:
        self._config = config or GraphConfig()
        self._adjacency: dict[str, set[str]] = {}

    # ── Membership ────────────────────────────────────────

    def add_person(self, name: str) -> bool:
        """Add a person with no friends.

        Returns True if added, False if the name was already present.
        """
        if name in self._adjacency:
            return False
        self._adjacency[name] = set()
        logger.debug(f"Added person: {name}")
        return True

    def remove_person(self, name: str) -> bool:
        """Remove a person and every friendship they were part of.

        Raises:
            PersonNotFound: if the person is not in the graph.
        """
        self._require(name)

        friends = self._adjacency.pop(name)
        for friend in friends:
            self._adjacency[friend].discard(name)

        logger.debug(f"Removed person: {name} ({len(friends)} connections dropped)")
        return True

    def has_person(self, name: str) -> bool:
        return name in self._adjacency

    @property
    def people(self) -> list[str]:
        """All names in the graph, sorted."""
        return sorted(self._adjacency)

    @property
    def config(self) -> GraphConfig:
        return self._config

    # ── Relationships ─────────────────────────────────────

    def connect(self, a: str, b: str) -> None:
        """Make two people friends.

        Connecting someone to themselves, or two people who are already
        friends, leaves the graph unchanged.

        Raises:
            PersonNotFound: naming the first of a, b that is missing.
        """
        self._require(a, b)

        if a == b or b in self._adjacency[a]:
            return

        self._adjacency[a].add(b)
        self._adjacency[b].add(a)
        logger.debug(f"Connected {a} <-> {b}")

    def are_connected(self, a: str, b: str) -> bool:
        """Whether a and b are direct friends."""
        self._require(a, b)
        return b in self._adjacency[a]

    def get_connections(self, name: str) -> list[str]:
        """Direct friends of a person, sorted A-Z."""
        self._require(name)
        return sorted(self._adjacency[name])

    def get_mutual_connections(self, a: str, b: str) -> list[str]:
        """Names that are friends with both a and b, sorted."""
        self._require(a, b)
        return sorted(self._adjacency[a] & self._adjacency[b])

    @property
    def connection_count(self) -> int:
        """Number of friendships (each undirected edge counted once)."""
        return sum(len(friends) for friends in self._adjacency.values()) // 2

    # ── Traversal ─────────────────────────────────────────

    def minimum_degree_of_separation(self, a: str, b: str) -> int:
        """Fewest hops between two people.

        Returns 0 when a == b. When no path exists the configured
        unreachable_degree is returned (-1 by default).
        """
        self._require(a, b)

        visited = {a}
        queue: deque[str] = deque([a])
        degree = 0

        while queue:
            # Drain exactly one level per pass so degree == hop count
            for _ in range(len(queue)):
                current = queue.popleft()
                if current == b:
                    return degree
                for friend in self._adjacency[current]:
                    if friend not in visited:
                        visited.add(friend)
                        queue.append(friend)
            degree += 1

        return self._config.unreachable_degree

    def connections_to_degree(self, name: str, max_level: int) -> list[str]:
        """Everyone within max_level hops of a person, sorted A-Z.

        The person themself is never included. max_level=1 is the same as
        get_connections(); anything below 1 yields an empty list.
        """
        self._require(name)

        result: list[str] = []
        distances = {name: 0}
        queue: deque[str] = deque([name])

        while queue:
            current = queue.popleft()
            distance = distances[current]

            # BFS order: everything still queued is at least this far out
            if distance > max_level:
                break

            if distance > 0:
                result.append(current)

            for friend in self._adjacency[current]:
                if friend not in distances:
                    distances[friend] = distance + 1
                    queue.append(friend)

        return sorted(result)

    def is_fully_connected(self) -> bool:
        """Whether every person can reach every other person.

        The search starts from the alphabetically first name; in an
        undirected graph any root gives the same answer.

        Raises:
            EmptyGraph: on an empty graph when config.empty_is_connected
                is False. Otherwise an empty graph counts as connected.
        """
        if not self._adjacency:
            if not self._config.empty_is_connected:
                raise EmptyGraph("Connectivity is undefined for an empty social network")
            return True

        root = min(self._adjacency)
        visited = self._reachable_from(root)

        logger.debug(
            f"Connectivity check from {root}: "
            f"{len(visited)}/{len(self._adjacency)} people reached"
        )
        return len(visited) == len(self._adjacency)

    def get_connection_chain(
        self,
        a: str,
        b: str,
        max_depth: int | None = None,
    ) -> list[str] | None:
        """Find a shortest chain of friends from a to b (BFS).

        Returns the names along the path, inclusive of both ends, or None
        if no path exists within max_depth hops. max_depth defaults to
        config.max_chain_depth (unbounded when that is None).
        """
        self._require(a, b)

        if max_depth is None:
            max_depth = self._config.max_chain_depth

        if a == b:
            return [a]

        visited = {a}
        queue: deque[list[str]] = deque([[a]])

        while queue:
            path = queue.popleft()

            # Already at max depth: can't go further
            if max_depth is not None and len(path) - 1 >= max_depth:
                continue

            for friend in sorted(self._adjacency[path[-1]]):
                if friend == b:
                    return path + [friend]
                if friend not in visited:
                    visited.add(friend)
                    queue.append(path + [friend])

        return None

    def connected_components(self) -> list[list[str]]:
        """Split the graph into groups of mutually reachable people.

        Each group is sorted, and groups are ordered by their first name.
        """
        seen: set[str] = set()
        components = []

        for name in sorted(self._adjacency):
            if name in seen:
                continue
            component = self._reachable_from(name)
            seen |= component
            components.append(sorted(component))

        return components

    def render_connections(self, name: str) -> str:
        """Render a person's friends as a single line.

        Example: "Connected to: Alice, Bob"
        """
        friends = self.get_connections(name)
        if not friends:
            return ""
        return "Connected to: " + ", ".join(friends)

    # ── Private helpers ───────────────────────────────────

    def _require(self, *names: str) -> None:
        """Raise PersonNotFound for the first name not in the graph."""
        for name in names:
            if name not in self._adjacency:
                logger.debug(f"Lookup failed: {name} not in social network")
                raise PersonNotFound(name)

    def _reachable_from(self, root: str) -> set[str]:
        """Everyone reachable from root, root included."""
        visited = {root}
        queue: deque[str] = deque([root])

        while queue:
            current = queue.popleft()
            for friend in self._adjacency[current]:
                if friend not in visited:
                    visited.add(friend)
                    queue.append(friend)

        return visited

    # ── Dunder ────────────────────────────────────────────

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._adjacency))

    def __repr__(self) -> str:
        return f"SocialGraph(people={len(self)}, connections={self.connection_count})"
