"""
Structured outcomes of graph queries.

Unknown words, missing bridge words, unreachable targets and empty graphs are
ordinary answers to a query, so they are reported through these result
objects rather than raised. Each result keeps a machine-readable ``status``
and renders a human-readable ``message`` for hosts that print it.
"""
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

QueryStatus = Literal["ok", "node_unknown", "no_bridge_words", "no_path", "empty_graph"]
NoPathReason = Literal["unreachable", "reconstruction_inconsistency"]
WalkState = Literal["idle", "walking", "stopped", "dead_end", "cycle_detected"]

TERMINAL_WALK_STATES = ("stopped", "dead_end", "cycle_detected")


def _unknown_message(word1: str, word2: str) -> str:
    return f"No {word1} or {word2} in the graph!"


@dataclass(frozen=True)
class BridgeWordsResult:
    """
    Outcome of a bridge-word query.

    Attributes:
        word1: Normalized first word of the query.
        word2: Normalized second word of the query.
        status: ``"ok"``, ``"node_unknown"`` or ``"no_bridge_words"``.
        bridge_words: Sorted bridge words; empty unless ``status == "ok"``.
        missing: The query words absent from the graph when
            ``status == "node_unknown"``.
    """

    word1: str
    word2: str
    status: QueryStatus
    bridge_words: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def message(self) -> str:
        if self.status == "node_unknown":
            return _unknown_message(self.word1, self.word2)
        if self.status == "no_bridge_words":
            return f"No bridge words from {self.word1} to {self.word2}!"
        return (
            f"The bridge words from {self.word1} to {self.word2} are: "
            + ", ".join(self.bridge_words)
        )


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Outcome of a shortest-path query.

    ``status == "no_path"`` covers both an unreachable target and a finite
    distance whose path could not be reconstructed; ``reason`` tells the two
    apart for diagnostics.

    Attributes:
        word1: Normalized start word.
        word2: Normalized target word.
        status: ``"ok"``, ``"node_unknown"`` or ``"no_path"``.
        path: Ordered words from ``word1`` to ``word2`` when ``ok``.
        distance: Total path cost when ``ok``; also set when the distance was
            finite but reconstruction failed.
        reason: Why there is no path, when ``status == "no_path"``.
        missing: The query words absent from the graph.
    """

    word1: str
    word2: str
    status: QueryStatus
    path: Tuple[str, ...] = ()
    distance: Optional[int] = None
    reason: Optional[NoPathReason] = None
    missing: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def path_text(self) -> str:
        return " → ".join(self.path)

    @property
    def message(self) -> str:
        if self.status == "node_unknown":
            return _unknown_message(self.word1, self.word2)
        if self.status == "no_path":
            return f"No path between {self.word1} and {self.word2}."
        return (
            f"The shortest path from {self.word1} to {self.word2} is: {self.path_text}\n"
            f"The shortest path distance from {self.word1} to {self.word2} is: {self.distance}"
        )


@dataclass(frozen=True)
class WalkResult:
    """
    Outcome of a random walk.

    Attributes:
        path: Visited words in order, starting with the random start word.
        state: Terminal state; ``"idle"`` only when the graph was empty.
        edges: Directed edges traversed, in order.
    """

    path: Tuple[str, ...]
    state: WalkState
    edges: Tuple[Tuple[str, str], ...] = ()

    @property
    def status(self) -> QueryStatus:
        return "empty_graph" if self.state == "idle" else "ok"

    @property
    def path_text(self) -> str:
        return " -> ".join(self.path)

    @property
    def message(self) -> str:
        if self.state == "idle":
            return "The graph is empty!"
        if self.state == "stopped":
            return f"Random walk stopped by user.\n{self.path_text}"
        if self.state == "dead_end":
            return f"{self.path_text}\n(reached a word with no successors)"
        return f"{self.path_text}\n(stopped before repeating an edge)"
