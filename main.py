import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from wordgraph.cli import read_config_file, run_menu
from wordgraph.config import AnalysisConfig
from wordgraph.errors import CorpusIngestionError
from wordgraph.session import GraphSession


logger = logging.getLogger(__name__)

DEFAULT_WALK_STEP_DELAY = 0.5


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive word graph explorer.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "corpus",
        type=Path,
        help="Path to the plain-text corpus file."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional AnalysisConfig JSON file."
    )
    parser.add_argument(
        "--walk-step-delay",
        type=float,
        default=None,
        help=(
            "Seconds between random walk steps, leaving time to stop the walk. "
            f"Overrides the config file; {DEFAULT_WALK_STEP_DELAY} without one."
        )
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AnalysisConfig:
    """Config file values, with ``--walk-step-delay`` applied on top when given."""
    config = read_config_file(args.config)
    if args.walk_step_delay is not None:
        return replace(config, walk_step_delay=args.walk_step_delay)
    if args.config is None:
        return replace(config, walk_step_delay=DEFAULT_WALK_STEP_DELAY)
    return config


def main(argv: Optional[List[str]] = None):
    """
    Build a word graph from a corpus file and open the interactive menu.

    This is the classic entry point: graph display, bridge words, new text
    generation, shortest paths and random walks, all from one prompt. The
    ``wordgraph`` CLI offers the same operations as one-shot subcommands.
    """
    args = parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    try:
        config = build_config(args)
        session = GraphSession.from_file(args.corpus, config)
    except (CorpusIngestionError, OSError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)

    run_menu(session)


if __name__ == "__main__":
    main()
