"""Melody Analyzer - Vocal melody analysis for MIDI files.

Architecture Layers:
    1. input/     - MIDI loading, score container and tempo map
    2. analysis/  - Melodic features (range, density, rhythm, intervals)
    3. inference/ - Musical understanding (vocal track, mode)
    4. output/    - Export (melody MIDI, JSON, text summary)
    5. service    - Public analysis API
"""

__version__ = "0.1.0"

# Core types
from .core import (
    NoteEvent,
    ErrorKind,
    Outcome,
    AnalysisError,
    MidiNotFoundError,
    NoVocalTrackError,
    EmptySelectionError,
)

# Input layer
from .input import MidiLoader, Score, Track, TempoMap

# Analysis layer
from .analysis import (
    RhythmCategory,
    RhythmDistribution,
    RhythmClassifier,
    IntervalCategory,
    IntervalDistribution,
    IntervalAnalyzer,
)

# Inference layer
from .inference import (
    VocalTrackScorer,
    VocalScoringConfig,
    TrackCandidate,
    ModeDetector,
    ModeAnalysis,
)

# Output layer
from .output import MelodyExporter, format_melody_info

# Service
from .service import MelodyAnalysisService, AnalysisResult, FileInfo

__all__ = [
    # Core
    "NoteEvent",
    "ErrorKind",
    "Outcome",
    "AnalysisError",
    "MidiNotFoundError",
    "NoVocalTrackError",
    "EmptySelectionError",
    # Input
    "MidiLoader",
    "Score",
    "Track",
    "TempoMap",
    # Analysis
    "RhythmCategory",
    "RhythmDistribution",
    "RhythmClassifier",
    "IntervalCategory",
    "IntervalDistribution",
    "IntervalAnalyzer",
    # Inference
    "VocalTrackScorer",
    "VocalScoringConfig",
    "TrackCandidate",
    "ModeDetector",
    "ModeAnalysis",
    # Output
    "MelodyExporter",
    "format_melody_info",
    # Service
    "MelodyAnalysisService",
    "AnalysisResult",
    "FileInfo",
]
