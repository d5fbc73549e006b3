"""
Analysis configuration shared by the CLI, the interactive menu and
``GraphSession``.

One JSON file can pin down everything that affects results (tokenization,
path reconstruction, randomness) as well as the rendering setup, so that a
run can be reproduced later.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Literal, Optional, Type

from .extractors.normalization import NORMALIZER_MAP, LetterNormalizer
from .extractors.protocols import WordNormalizer

logger = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    """
    Configuration for building and querying a word graph.

    Attributes:
        encoding: Text encoding of the corpus file
        normalizer_type: Tokenizer to use ('letters', 'hyphen_joining')
        reconstruction: Shortest-path reconstruction mode ('weighted', 'unit_step')
        seed: Seed for query randomness; None draws from the OS entropy pool
        walk_step_delay: Seconds between random-walk steps
        show_progress: Show a progress bar while reading the corpus
        dot_executable: Graphviz executable used for rendering
        image_format: Graphviz output format (-T flag)
        output_dir: Directory for DOT files, images and walk transcripts
    """

    encoding: str = 'utf-8'
    normalizer_type: Literal['letters', 'hyphen_joining'] = 'letters'
    reconstruction: Literal['weighted', 'unit_step'] = 'weighted'
    seed: Optional[int] = None
    walk_step_delay: float = 0.0
    show_progress: bool = False
    dot_executable: str = 'dot'
    image_format: str = 'png'
    output_dir: Path = field(default_factory=lambda: Path('.'))

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.output_dir = Path(self.output_dir)

        if self.normalizer_type not in NORMALIZER_MAP:
            raise ValueError(
                f"Unknown normalizer_type: {self.normalizer_type}. "
                f"Available types: {list(NORMALIZER_MAP.keys())}"
            )

        if self.reconstruction not in ['weighted', 'unit_step']:
            raise ValueError(
                f"reconstruction must be 'weighted' or 'unit_step', got {self.reconstruction}"
            )

        if self.walk_step_delay < 0:
            raise ValueError(f"walk_step_delay must be non-negative, got {self.walk_step_delay}")

        if not self.image_format or not self.image_format.isalnum():
            raise ValueError(f"image_format must be a Graphviz format name, got {self.image_format!r}")

        if self.reconstruction == 'unit_step':
            logger.info(
                "Using unit_step path reconstruction; paths over edges heavier "
                "than 1 will be reported as missing."
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data['output_dir'] = str(self.output_dir)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'AnalysisConfig':
        """Create from dictionary."""
        return cls(**data)

    def save(self, path: Path) -> None:
        """Save configuration to JSON file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> 'AnalysisConfig':
        """Load configuration from JSON file."""
        with open(path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def get_normalizer(self) -> WordNormalizer:
        """Instantiate the configured tokenizer."""
        normalizer_class: Type[LetterNormalizer] = NORMALIZER_MAP[self.normalizer_type]
        return normalizer_class()
