from .analysis import analyze_image
from .config import Config
from .errors import (
    ConfigurationError,
    EmptyResponse,
    InvalidImageError,
    NoImageReturned,
    ParseError,
    ShotDirectorError,
)
from .pipeline import SequenceOutcome, SequencePipeline
from .storyboard import generate_storyboard

__all__ = [
    "analyze_image", "generate_storyboard",
    "Config",
    "SequencePipeline", "SequenceOutcome",
    "ShotDirectorError", "ConfigurationError", "InvalidImageError",
    "EmptyResponse", "ParseError", "NoImageReturned",
]
