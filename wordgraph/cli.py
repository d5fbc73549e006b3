#!/usr/bin/env python
"""
Unified CLI for word graph analysis.

Usage:
    python -m wordgraph.cli show corpus.txt [--render]
    python -m wordgraph.cli bridge corpus.txt word1 word2
    python -m wordgraph.cli augment corpus.txt "some new text"
    python -m wordgraph.cli path corpus.txt word1 [word2] [--render]
    python -m wordgraph.cli walk corpus.txt [-o walk.txt]
    python -m wordgraph.cli menu corpus.txt
"""
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .config import AnalysisConfig
from .dot_export import render_dot, write_dot
from .errors import RenderError, WordGraphError
from .session import GraphSession

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[..., None]


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "corpus",
        type=Path,
        help="Plain-text corpus file to build the graph from"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="AnalysisConfig JSON file"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for random choices (overrides the config)"
    )
    parser.add_argument(
        "--reconstruction",
        choices=["weighted", "unit_step"],
        help="Shortest-path reconstruction mode (overrides the config)"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordgraph",
        description="Build a word-adjacency graph from a text corpus and query it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Operation")

    show_parser = subparsers.add_parser(
        "show",
        help="Summarize the graph and write it as DOT",
        description="Write the directed graph to a DOT file, optionally rendering it with Graphviz"
    )
    _add_common_arguments(show_parser)
    show_parser.add_argument(
        "--render",
        action="store_true",
        help="Render the DOT file to an image with Graphviz"
    )

    bridge_parser = subparsers.add_parser(
        "bridge",
        help="Query bridge words between two words"
    )
    _add_common_arguments(bridge_parser)
    bridge_parser.add_argument("word1")
    bridge_parser.add_argument("word2")

    augment_parser = subparsers.add_parser(
        "augment",
        help="Insert bridge words into new text"
    )
    _add_common_arguments(augment_parser)
    augment_parser.add_argument("text", help="Text to augment")

    path_parser = subparsers.add_parser(
        "path",
        help="Shortest path between two words, or from one word to all others"
    )
    _add_common_arguments(path_parser)
    path_parser.add_argument("word1")
    path_parser.add_argument("word2", nargs="?")
    path_parser.add_argument(
        "--render",
        action="store_true",
        help="Write and render the graph with the path highlighted"
    )

    walk_parser = subparsers.add_parser(
        "walk",
        help="Perform one random walk"
    )
    _add_common_arguments(walk_parser)
    walk_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Also write the walked words to this file"
    )

    menu_parser = subparsers.add_parser(
        "menu",
        help="Interactive menu"
    )
    _add_common_arguments(menu_parser)

    return parser


def read_config_file(path: Optional[Path]) -> AnalysisConfig:
    """
    Load an ``AnalysisConfig`` JSON file, or the defaults when ``path`` is None.

    Raises:
        ValueError: If the file holds unknown fields or invalid values
    """
    if path is None:
        return AnalysisConfig()
    try:
        return AnalysisConfig.load(path)
    except TypeError as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e


def load_config(args: argparse.Namespace) -> AnalysisConfig:
    config = read_config_file(args.config)
    overrides = {'show_progress': not args.quiet}
    if args.seed is not None:
        overrides['seed'] = args.seed
    if args.reconstruction is not None:
        overrides['reconstruction'] = args.reconstruction
    return replace(config, **overrides)


def export_graph(
    session: GraphSession,
    stem: str,
    highlight_path: Optional[Sequence[str]] = None,
    render: bool = True,
) -> Path:
    """
    Write ``<output_dir>/<stem>.dot`` and, if requested, render it.

    A failed render is logged and the DOT file is still returned.
    """
    config = session.config
    dot_path = write_dot(session.graph, config.output_dir / f"{stem}.dot", highlight_path)
    if not render:
        return dot_path

    image_path = config.output_dir / f"{stem}.{config.image_format}"
    try:
        return render_dot(dot_path, image_path, config.dot_executable, config.image_format)
    except RenderError as e:
        logger.warning(f"Could not render {dot_path}: {e}")
        return dot_path


def print_summary(session: GraphSession, print_fn: PrintFn = print) -> None:
    graph = session.graph
    print_fn(
        f"{graph.num_nodes} source words, {len(graph.vocabulary)} distinct words, "
        f"{graph.num_edges} edges"
    )
    for word, count in graph.most_frequent(5):
        print_fn(f"  {word}: {count}")


def print_paths_from(session: GraphSession, word1: str, print_fn: PrintFn = print) -> None:
    results = session.shortest_paths_from(word1)
    if not results:
        print_fn(f"No {word1} in the graph!")
        return
    for result in results.values():
        print_fn(result.message)


def run_walk(
    session: GraphSession,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
):
    """Run a walk on its own thread until it ends or the user enters 's'."""
    handle = session.start_random_walk()
    while not handle.done:
        try:
            answer = input_fn("Enter 's' to stop the random walk or just press enter to continue: ")
        except EOFError:
            answer = "s"
        if answer.strip().lower() == "s":
            handle.cancel()
            break
    result = handle.join()
    print_fn(result.message)
    return result


def run_menu(
    session: GraphSession,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> None:
    """Interactive main menu; returns when the user picks Exit or input ends."""
    while True:
        print_fn("\n--- Main Menu ---")
        print_fn("1. Show Directed Graph")
        print_fn("2. Query Bridge Words")
        print_fn("3. Generate New Text")
        print_fn("4. Calculate Shortest Path")
        print_fn("5. Perform Random Walk")
        print_fn("6. Exit")
        try:
            choice = input_fn("Enter your choice (1-6): ").strip()[:1]

            if choice == "1":
                print_summary(session, print_fn)
                path = export_graph(session, "graph")
                print_fn(f"Graph written to '{path}'")
            elif choice == "2":
                word1 = input_fn("Enter word 1: ")
                word2 = input_fn("Enter word 2: ")
                print_fn(session.query_bridge_words(word1, word2).message)
            elif choice == "3":
                text = input_fn("Enter a line of text to generate new text: ")
                print_fn(f"Generated new text: {session.augment_text(text)}")
            elif choice == "4":
                word1 = input_fn("Enter word 1: ")
                word2 = input_fn("Enter word 2 (leave empty for all paths): ")
                if not word2.strip():
                    print_paths_from(session, word1, print_fn)
                    continue
                result = session.shortest_path(word1, word2)
                print_fn(result.message)
                if result.ok:
                    path = export_graph(session, "shortest_path", result.path)
                    print_fn(f"Graph with highlighted shortest path written to '{path}'")
            elif choice == "5":
                print_fn("\nPerforming a random walk... Press 's' to stop.")
                run_walk(session, input_fn, print_fn)
            elif choice == "6":
                print_fn("Exiting program.")
                return
            else:
                print_fn("Invalid choice. Please enter a number between 1 and 6.")
        except EOFError:
            print_fn("Exiting program.")
            return


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(levelname)s: %(message)s'
    )

    try:
        config = load_config(args)
        session = GraphSession.from_file(args.corpus, config)

        if args.command == "show":
            print_summary(session)
            path = export_graph(session, "graph", render=args.render)
            print(f"Graph written to '{path}'")

        elif args.command == "bridge":
            print(session.query_bridge_words(args.word1, args.word2).message)

        elif args.command == "augment":
            print(session.augment_text(args.text))

        elif args.command == "path":
            if args.word2 is None:
                print_paths_from(session, args.word1)
            else:
                result = session.shortest_path(args.word1, args.word2)
                print(result.message)
                if result.ok and args.render:
                    export_graph(session, "shortest_path", result.path)

        elif args.command == "walk":
            result = session.start_random_walk().join()
            print(result.message)
            if args.output is not None:
                args.output.write_text(" ".join(result.path) + "\n", encoding="utf-8")
                logging.info(f"Walk written to {args.output}")

        elif args.command == "menu":
            run_menu(session)

    except (WordGraphError, OSError, ValueError) as e:
        logging.error(f"{args.command} failed: {e}", exc_info=args.verbose)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
