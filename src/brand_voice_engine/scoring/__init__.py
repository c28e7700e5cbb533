"""Alignment scoring of candidate text against a brand voice."""

from .scorer import (
    FORMALITY_SCALE,
    TONE_NEIGHBOURS,
    AlignmentScorer,
    are_adjacent,
    categorical_similarity,
    tier_similarity,
)

__all__ = [
    "AlignmentScorer",
    "FORMALITY_SCALE",
    "TONE_NEIGHBOURS",
    "are_adjacent",
    "categorical_similarity",
    "tier_similarity",
]
