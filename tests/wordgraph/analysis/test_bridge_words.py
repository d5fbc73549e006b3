import pytest

from wordgraph.analysis.bridge_words import BridgeWordResolver
from wordgraph.extractors.graph_builder import build_graph
from wordgraph.word_graph import WordGraph


@pytest.fixture
def resolver():
    graph = build_graph([
        "the cat sat on the mat",
        "a b c",
        "a d c",
    ])
    return BridgeWordResolver(graph)


def test_round_trip_sentence_bridge(resolver):
    result = resolver.query("the", "sat")
    assert result.status == "ok"
    assert "cat" in result.bridge_words


def test_multiple_bridge_words(resolver):
    result = resolver.query("a", "c")
    assert result.ok
    assert result.bridge_words == ("b", "d")
    assert result.message == "The bridge words from a to c are: b, d"


def test_query_words_are_normalized(resolver):
    result = resolver.query("The", "SAT!")
    assert result.word1 == "the"
    assert result.bridge_words == ("cat",)


def test_no_bridge_words(resolver):
    # the -> {cat, mat}; only sat precedes on
    result = resolver.query("the", "on")
    assert result.status == "no_bridge_words"
    assert result.bridge_words == ()
    assert result.message == "No bridge words from the to on!"


def test_unknown_word_names_missing(resolver):
    result = resolver.query("the", "zebra")
    assert result.status == "node_unknown"
    assert result.missing == ("zebra",)
    assert result.message == "No the or zebra in the graph!"

    both = resolver.query("lion", "zebra")
    assert both.missing == ("lion", "zebra")


def test_target_only_word_is_known(resolver):
    # "mat" only ever ends a line: no successors, but it was observed
    result = resolver.query("the", "mat")
    assert result.status == "no_bridge_words"
    assert resolver.query("on", "mat").bridge_words == ("the",)


def test_unknown_and_no_bridge_are_distinguishable(resolver):
    unknown = resolver.query("x", "y")
    empty = resolver.query("the", "on")
    assert unknown.status == "node_unknown"
    assert empty.status == "no_bridge_words"
    assert unknown.message != empty.message


def test_bridge_set_subset_of_successors():
    graph = build_graph([
        "one two three two one three one",
        "three two two one",
    ])
    resolver = BridgeWordResolver(graph)
    for word1 in graph:
        for word2 in graph:
            result = resolver.query(word1, word2)
            assert set(result.bridge_words) <= graph.successors(word1)
            for bridge in result.bridge_words:
                assert graph.has_edge(bridge, word2)


def test_self_bridge_words():
    graph = WordGraph({"a": {"b"}, "b": {"a"}})
    resolver = BridgeWordResolver(graph)
    assert resolver.query("a", "a").bridge_words == ("b",)
    assert resolver.query("a", "b").status == "no_bridge_words"


def test_predecessors_matches_graph_scan():
    graph = build_graph(["x y z", "w y", "z y"])
    resolver = BridgeWordResolver(graph)
    assert resolver.predecessors("y") == graph.predecessors("y") == {"x", "w", "z"}
    assert resolver.predecessors("nothing") == set()
