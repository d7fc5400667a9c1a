from .base import CamelModel
from .analysis_result import SHOT_COUNT, AnalysisResult, NarrativeArc, Shot, VisualAnchor

__all__ = [
    "CamelModel", "SHOT_COUNT",
    "AnalysisResult", "VisualAnchor", "NarrativeArc", "Shot",
]
