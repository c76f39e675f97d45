"""Inference layer - Musical understanding of a score.

This layer builds higher-level understanding from note events:
- Vocal track identification (which track carries the melody)
- Mode detection (tonal center, scale and confidence)

Pipeline: Score → [Vocal track] → Notes → [Mode]
"""

from .vocal import VocalTrackScorer, VocalScoringConfig, TrackCandidate
from .mode import ModeDetector, ModeAnalysis

__all__ = [
    # Vocal track identification
    "VocalTrackScorer",
    "VocalScoringConfig",
    "TrackCandidate",
    # Mode detection
    "ModeDetector",
    "ModeAnalysis",
]
