"""
Style Analysis Module

Extract quantifiable patterns in a writer's samples and encode them as
VoiceCharacteristics.
"""

from .metrics import (
    Distribution,
    SourceMetrics,
    calculate_source_metrics,
    classify_sentence_structure,
)
from .classifier import SourceClassification, classify_source, plurality
from .extractor import CharacteristicExtractor, ExtractionResult

__all__ = [
    # Metrics
    "Distribution",
    "SourceMetrics",
    "calculate_source_metrics",
    "classify_sentence_structure",
    # Classification
    "SourceClassification",
    "classify_source",
    "plurality",
    # Extractor
    "CharacteristicExtractor",
    "ExtractionResult",
]
