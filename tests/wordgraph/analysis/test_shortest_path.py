import math
import random
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from wordgraph.analysis.shortest_path import ShortestPathEngine
from wordgraph.extractors.graph_builder import build_graph
from wordgraph.word_graph import WordGraph


@pytest.fixture
def sentence_graph():
    return build_graph(["the cat sat on the mat"])


def bellman_ford_distances(graph, source):
    """Bellman-Ford over graph keys, for cross-checking Floyd-Warshall."""
    dist = {source: 0}
    for _ in range(len(graph)):
        for a, b, w in graph.edges():
            if a in dist and b in graph and dist[a] + w < dist.get(b, math.inf):
                dist[b] = dist[a] + w
    return dist


def test_simple_path(sentence_graph):
    result = ShortestPathEngine(sentence_graph).shortest_path("the", "on")
    assert result.ok
    assert result.path == ("the", "cat", "sat", "on")
    assert result.distance == 3
    assert "the → cat → sat → on" in result.message
    assert "distance from the to on is: 3" in result.message


def test_path_wraps_around_cycle(sentence_graph):
    result = ShortestPathEngine(sentence_graph).shortest_path("on", "cat")
    assert result.path == ("on", "the", "cat")
    assert result.distance == 2


def test_same_word_has_zero_distance(sentence_graph):
    result = ShortestPathEngine(sentence_graph).shortest_path("cat", "cat")
    assert result.ok
    assert result.distance == 0
    assert result.path == ("cat",)


def test_unknown_words(sentence_graph):
    engine = ShortestPathEngine(sentence_graph)

    result = engine.shortest_path("the", "dog")
    assert result.status == "node_unknown"
    assert result.missing == ("dog",)
    assert result.message == "No the or dog in the graph!"

    # "mat" never starts a pair, so it cannot be an endpoint
    assert engine.shortest_path("the", "mat").status == "node_unknown"
    assert engine.shortest_path("mat", "mat").status == "node_unknown"


def test_unreachable():
    graph = build_graph(["a b", "c d"])
    result = ShortestPathEngine(graph).shortest_path("a", "c")
    assert result.status == "no_path"
    assert result.reason == "unreachable"
    assert result.message == "No path between a and c."


def test_frequent_transitions_are_longer():
    # x -> z is seen three times, so the detour through y is shorter
    graph = build_graph(["x y z a", "x z a", "x z a", "x z a"])
    result = ShortestPathEngine(graph).shortest_path("x", "z")
    assert graph.weight("x", "z") == 3
    assert result.distance == 2
    assert result.path == ("x", "y", "z")


def test_weighted_reconstruction_over_heavy_edges():
    graph = build_graph(["a b", "a b", "b c d"])
    result = ShortestPathEngine(graph, reconstruction="weighted").shortest_path("a", "c")
    assert result.ok
    assert result.path == ("a", "b", "c")
    assert result.distance == 3


def test_unit_step_reconstruction_reports_inconsistency(caplog):
    graph = build_graph(["a b", "a b", "b c d"])
    engine = ShortestPathEngine(graph, reconstruction="unit_step")

    with caplog.at_level("WARNING"):
        result = engine.shortest_path("a", "c")

    assert result.status == "no_path"
    assert result.reason == "reconstruction_inconsistency"
    assert result.distance == 3
    assert result.message == "No path between a and c."
    assert "reconstruction" in caplog.text


def test_unit_step_matches_weighted_on_unit_graph(sentence_graph):
    unit = ShortestPathEngine(sentence_graph, reconstruction="unit_step")
    weighted = ShortestPathEngine(sentence_graph, reconstruction="weighted")
    for word1 in sentence_graph:
        for word2 in sentence_graph:
            assert unit.shortest_path(word1, word2) == weighted.shortest_path(word1, word2)


def test_unit_step_oscillation_is_bounded():
    graph = WordGraph(
        {"a": {"b", "c"}, "b": {"a"}, "c": set()},
        edge_weights={("a", "b"): 1, ("a", "c"): 5, ("b", "a"): 1},
    )
    unit = ShortestPathEngine(graph, reconstruction="unit_step").shortest_path("a", "c")
    assert unit.reason == "reconstruction_inconsistency"

    weighted = ShortestPathEngine(graph).shortest_path("a", "c")
    assert weighted.path == ("a", "c")
    assert weighted.distance == 5


def test_self_loop_keeps_zero_diagonal():
    graph = WordGraph(
        {"a": {"a", "b"}, "b": set()},
        edge_weights={("a", "a"): 3, ("a", "b"): 1},
    )
    matrix = ShortestPathEngine(graph).compute_distances()
    assert matrix.distance("a", "a") == 0
    assert matrix.distance("a", "b") == 1
    assert np.isinf(matrix.distance("b", "a"))


def test_distance_matrix_shape_and_index(sentence_graph):
    matrix = ShortestPathEngine(sentence_graph).compute_distances()
    assert len(matrix) == 4
    assert matrix.dist.shape == (4, 4)
    assert matrix.nodes == ["the", "cat", "sat", "on"]
    assert np.all(np.diag(matrix.dist) == 0)


def test_matrix_is_fresh_per_call(sentence_graph):
    engine = ShortestPathEngine(sentence_graph)
    first = engine.compute_distances()
    first.dist[:] = 0.0

    second = engine.compute_distances()
    assert second.dist is not first.dist
    assert second.distance("the", "on") == 3
    assert engine.shortest_path("the", "on").distance == 3


def test_matches_bellman_ford_on_random_graph():
    rng = random.Random(5)
    vocab = list("abcdefgh")
    lines = [" ".join(rng.choice(vocab) for _ in range(6)) for _ in range(15)]
    graph = build_graph(lines)
    matrix = ShortestPathEngine(graph).compute_distances()

    for source in graph:
        expected = bellman_ford_distances(graph, source)
        for target in graph:
            assert matrix.distance(source, target) == expected.get(target, math.inf)


def test_shortest_paths_from(sentence_graph):
    results = ShortestPathEngine(sentence_graph).shortest_paths_from("The")
    assert set(results) == {"cat", "sat", "on"}
    assert results["sat"].path == ("the", "cat", "sat")
    assert all(r.ok for r in results.values())

    assert ShortestPathEngine(sentence_graph).shortest_paths_from("dog") == {}


def test_empty_graph():
    engine = ShortestPathEngine(WordGraph({}))
    assert len(engine.compute_distances()) == 0
    assert engine.shortest_path("a", "b").status == "node_unknown"


def test_concurrent_queries_agree(sentence_graph):
    engine = ShortestPathEngine(sentence_graph)
    pairs = [(a, b) for a in sentence_graph for b in sentence_graph] * 5
    expected = [engine.shortest_path(a, b) for a, b in pairs]

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda pair: engine.shortest_path(*pair), pairs))
    assert results == expected


def test_invalid_reconstruction_mode(sentence_graph):
    with pytest.raises(ValueError, match="reconstruction"):
        ShortestPathEngine(sentence_graph, reconstruction="fastest")
