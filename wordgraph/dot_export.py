"""
Graphviz DOT export for word graphs.

Turns a ``WordGraph`` into DOT text (optionally highlighting a path), writes
it to disk and shells out to the Graphviz ``dot`` executable to produce an
image. Nothing in the query code depends on this module.
"""
import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple

from .errors import RenderError
from .word_graph import WordGraph

logger = logging.getLogger(__name__)


def escape_dot(text: str) -> str:
    """Escape a string for use inside a double-quoted DOT identifier."""
    return text.replace('\\', '\\\\').replace('"', '\\"')


def to_dot(graph: WordGraph, highlight_path: Optional[Sequence[str]] = None) -> str:
    """
    Serialize ``graph`` as a left-to-right DOT digraph.

    Every edge is labelled with its weight. When ``highlight_path`` is given,
    all nodes are drawn light gray and the path's nodes and edges red.

    Args:
        graph: Graph to serialize
        highlight_path: Optional ordered words of a path to highlight

    Returns:
        DOT source text
    """
    path_nodes: Set[str] = set(highlight_path or ())
    path_edges: Set[Tuple[str, str]] = set(zip(highlight_path or (), (highlight_path or ())[1:]))

    lines: List[str] = ['digraph G {', '  rankdir=LR;']
    if highlight_path:
        lines.append('  node[shape=circle];')

    # Target-only words get declared too so that styling applies to them
    for node in sorted(graph.vocabulary):
        if not highlight_path:
            lines.append(f'  "{escape_dot(node)}" [shape=circle];')
        elif node in path_nodes:
            lines.append(f'  "{escape_dot(node)}" [style=filled, fillcolor=red];')
        else:
            lines.append(f'  "{escape_dot(node)}" [style=filled, fillcolor=lightgray];')

    for source, target, weight in graph.edges():
        attrs = f'label="{weight}"'
        if (source, target) in path_edges:
            attrs += ', color=red, style=bold'
        lines.append(f'  "{escape_dot(source)}" -> "{escape_dot(target)}" [{attrs}];')

    lines.append('}')
    return '\n'.join(lines) + '\n'


def write_dot(
    graph: WordGraph,
    output_path: Path,
    highlight_path: Optional[Sequence[str]] = None,
) -> Path:
    """Write the DOT serialization of ``graph`` to ``output_path``."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(to_dot(graph, highlight_path))
    logger.info(f"DOT file written to {output_path}")
    return output_path


def render_dot(
    dot_path: Path,
    image_path: Path,
    executable: str = 'dot',
    image_format: str = 'png',
) -> Path:
    """
    Render a DOT file to an image with Graphviz.

    Args:
        dot_path: Existing DOT file
        image_path: Where the image should be written
        executable: Graphviz executable name or path
        image_format: Output format passed as ``-T<format>``

    Returns:
        ``image_path``

    Raises:
        RenderError: If Graphviz is not installed or exits with an error
    """
    resolved = shutil.which(executable)
    if resolved is None:
        raise RenderError(f"Graphviz executable not found: {executable}")

    cmd = [resolved, f'-T{image_format}', str(dot_path), '-o', str(image_path)]
    logger.debug(f"Running {' '.join(cmd)}")
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as e:
        raise RenderError(f"Could not run {resolved}: {e}") from e

    if proc.returncode != 0:
        raise RenderError(
            f"Graphviz exited with status {proc.returncode}: {proc.stderr.strip()}"
        )

    logger.info(f"Graph visualization generated as {image_path}")
    return Path(image_path)
