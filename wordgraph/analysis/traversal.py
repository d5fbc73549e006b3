import logging
import random
import threading
from typing import Callable, List, Optional, Set, Tuple

from ..results import WalkResult, WalkState
from ..word_graph import WordGraph

logger = logging.getLogger(__name__)


class RandomWalker:
    """
    A single stochastic walk over the graph that stops before reusing an edge.

    The walk starts at a uniformly random graph key and repeatedly follows a
    uniformly random outgoing edge. It ends in one of three states:

    - ``"dead_end"``: the current word has no successors.
    - ``"cycle_detected"``: the chosen edge was already traversed during this
      walk. The repeated edge is not followed again, so a walk takes at most
      one step per distinct edge.
    - ``"stopped"``: the cancellation event was set. It is checked before
      every step, and also interrupts the optional pause between steps.

    An empty graph yields an ``"idle"`` result with an empty path.

    Notes:
        - Successors are sampled from a sorted list, so a seeded
          ``random.Random`` reproduces the same walk on the same graph.
        - The walker only reads the graph and the event, so ``walk`` may run
          on its own thread while the caller keeps going (see ``start``).
    """

    def __init__(self, graph: WordGraph, step_delay: float = 0.0):
        """
        Args:
            graph: The immutable graph to walk.
            step_delay: Seconds to pause after each step. A pause gives an
                interactive user time to cancel; 0 walks at full speed.
        """
        if step_delay < 0:
            raise ValueError(f"step_delay must be non-negative, got {step_delay}.")
        self.graph = graph
        self.step_delay = float(step_delay)

    def walk(
        self,
        rng: random.Random,
        cancel: Optional[threading.Event] = None,
        on_step: Optional[Callable[[str], None]] = None,
    ) -> WalkResult:
        """
        Perform one walk to completion.

        Args:
            rng: Source of randomness for the start word and every step.
            cancel: Event another thread may set to stop the walk early.
            on_step: Called with each word as it is visited, start included.

        Returns:
            The visited words and the terminal state.
        """
        if cancel is None:
            cancel = threading.Event()

        nodes = self.graph.nodes
        if not nodes:
            logger.info("Random walk requested on an empty graph")
            return WalkResult(path=(), state="idle")

        current = rng.choice(nodes)
        path: List[str] = [current]
        edges: List[Tuple[str, str]] = []
        visited: Set[Tuple[str, str]] = set()
        if on_step is not None:
            on_step(current)

        state: WalkState = "walking"
        while state == "walking":
            if cancel.is_set():
                state = "stopped"
                break

            successors = sorted(self.graph.successors(current))
            if not successors:
                state = "dead_end"
                break

            chosen = rng.choice(successors)
            edge = (current, chosen)
            if edge in visited:
                state = "cycle_detected"
                break

            visited.add(edge)
            edges.append(edge)
            path.append(chosen)
            current = chosen
            if on_step is not None:
                on_step(chosen)

            if self.step_delay:
                # Returns early once the event is set; the loop head reports it.
                cancel.wait(self.step_delay)

        logger.debug(f"Random walk ended in {state} after {len(edges)} steps")
        return WalkResult(path=tuple(path), state=state, edges=tuple(edges))

    def start(
        self,
        rng: random.Random,
        cancel: Optional[threading.Event] = None,
        on_step: Optional[Callable[[str], None]] = None,
    ) -> "WalkHandle":
        """
        Run ``walk`` on a background daemon thread.

        Returns:
            A ``WalkHandle`` for cancelling the walk and reading its result.
        """
        handle = WalkHandle(cancel if cancel is not None else threading.Event())

        def run() -> None:
            try:
                handle._result = self.walk(rng, handle.cancel_event, on_step)
            except Exception as exc:
                logger.error(f"Random walk failed: {exc}", exc_info=True)
                handle._error = exc

        handle._thread = threading.Thread(target=run, daemon=True, name="random-walk")
        handle._thread.start()
        return handle


class WalkHandle:
    """
    Caller-side view of a walk running on another thread.

    The only channel to the walker is ``cancel_event``; the result becomes
    available once the thread has finished.
    """

    def __init__(self, cancel_event: threading.Event):
        self.cancel_event = cancel_event
        self._thread: Optional[threading.Thread] = None
        self._result: Optional[WalkResult] = None
        self._error: Optional[BaseException] = None

    def cancel(self) -> None:
        """Ask the walk to stop before its next step."""
        self.cancel_event.set()

    @property
    def done(self) -> bool:
        return self._thread is not None and not self._thread.is_alive()

    @property
    def state(self) -> WalkState:
        if not self.done:
            return "walking"
        return self._result.state if self._result is not None else "idle"

    @property
    def result(self) -> Optional[WalkResult]:
        """The finished walk, or ``None`` while it is still running."""
        if not self.done:
            return None
        if self._error is not None:
            raise RuntimeError("Random walk failed") from self._error
        return self._result

    def join(self, timeout: Optional[float] = None) -> Optional[WalkResult]:
        """
        Wait for the walk to finish.

        Returns:
            The result, or ``None`` if ``timeout`` elapsed first.
        """
        if self._thread is not None:
            self._thread.join(timeout)
        return self.result
