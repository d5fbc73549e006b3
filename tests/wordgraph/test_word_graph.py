import pytest

from wordgraph.word_graph import WordGraph


@pytest.fixture
def graph():
    return WordGraph(
        {"a": {"b", "c"}, "b": {"c"}, "c": {"a"}},
        edge_weights={("a", "b"): 2, ("a", "c"): 1, ("b", "c"): 4, ("c", "a"): 1},
    )


def test_default_weights_and_frequency():
    g = WordGraph({"x": ["y", "z"], "y": ["z"]})

    assert g.weight("x", "y") == 1
    assert g.num_edges == 3
    # Frequency defaults to the sum of outgoing weights
    assert g.word_frequency["x"] == 2
    assert g.word_frequency["y"] == 1


def test_accessors(graph):
    assert graph.nodes == ["a", "b", "c"]
    assert graph.num_nodes == 3
    assert len(graph) == 3
    assert "a" in graph and "z" not in graph
    assert graph.successors("a") == frozenset({"b", "c"})
    assert graph.successors("missing") == frozenset()
    assert graph.predecessors("c") == {"a", "b"}
    assert graph.weight("b", "c") == 4
    assert graph.weight("c", "b") == 0
    assert graph.has_edge("c", "a")
    assert graph.word_frequency["b"] == 4


def test_vocabulary_includes_target_only_words():
    g = WordGraph({"a": {"end"}})
    assert g.vocabulary == frozenset({"a", "end"})
    assert "end" not in g


def test_index_map_follows_key_order(graph):
    assert graph.index_map() == {"a": 0, "b": 1, "c": 2}


def test_edges_yields_weights(graph):
    assert sorted(graph.edges()) == [
        ("a", "b", 2), ("a", "c", 1), ("b", "c", 4), ("c", "a", 1),
    ]


def test_most_frequent_breaks_ties_alphabetically():
    g = WordGraph({"b": {"x"}, "a": {"x"}, "c": {"x", "y"}})
    assert g.most_frequent(2) == [("c", 2), ("a", 1)]


def test_mappings_are_read_only(graph):
    with pytest.raises(TypeError):
        graph.graph["z"] = frozenset()
    with pytest.raises(TypeError):
        graph.edge_weights[("a", "b")] = 10
    with pytest.raises(AttributeError):
        graph.successors("a").add("z")


def test_rejects_weight_for_missing_edge():
    with pytest.raises(ValueError, match="not in the graph"):
        WordGraph({"a": {"b"}}, edge_weights={("a", "b"): 1, ("b", "a"): 1})


def test_rejects_edge_without_weight():
    with pytest.raises(ValueError, match="without a weight"):
        WordGraph({"a": {"b", "c"}}, edge_weights={("a", "b"): 1})


def test_rejects_non_positive_weight():
    with pytest.raises(ValueError, match="positive integer"):
        WordGraph({"a": {"b"}}, edge_weights={("a", "b"): 0})


def test_isolated_node_allowed():
    g = WordGraph({"alone": set()})
    assert g.nodes == ["alone"]
    assert g.num_edges == 0
    assert g.successors("alone") == frozenset()
