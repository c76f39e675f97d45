"""Plain-data and text renderings of analysis results."""

from typing import Any, Dict, List, Optional

from ..core import PITCH_NAMES
from ..inference import TrackCandidate


def pitch_label(pitch: int) -> str:
    """MIDI pitch as note name with octave (60 -> 'C4')."""
    return f"{PITCH_NAMES[pitch % 12]}{pitch // 12 - 1}"


def result_to_dict(result) -> Dict[str, Any]:
    """Convert an AnalysisResult to a JSON-ready dict."""
    return {
        "file_path": result.file_path,
        "track": {"index": result.track_index, "name": result.track_name},
        "total_notes": result.total_notes,
        "note_range": {
            "min": result.note_range[0],
            "max": result.note_range[1],
        },
        "rhythm": result.rhythm.as_dict(),
        "intervals": result.intervals.as_dict(),
        "mode": {
            "detected_mode": result.mode.detected_mode,
            "confidence": result.mode.confidence,
            "scale_notes": list(result.mode.scale_notes),
            "tonic": result.mode.tonic,
        },
    }


def file_info_to_dict(info) -> Dict[str, Any]:
    """Convert a FileInfo to a JSON-ready dict."""
    return {
        "file_path": info.file_path,
        "track_count": info.track_count,
        "duration": info.duration,
        "ticks_per_quarter_note": info.ticks_per_quarter_note,
        "tempo_bpm": info.tempo_bpm,
    }


def candidates_to_list(candidates: List[TrackCandidate]) -> List[Dict[str, Any]]:
    return [
        {
            "track_index": c.track_index,
            "track_name": c.track_name,
            "note_count": c.note_count,
            "pitch_range": list(c.pitch_range),
            "score": c.score,
        }
        for c in candidates
    ]


def format_melody_info(result: Optional[Any]) -> str:
    """
    Short melody summary for prompt construction.

    Lists the pitch range, the detected mode and the three dominant
    rhythm categories. Rhythms are ranked by share (ties in category
    order) rather than taken in category order.
    """
    if result is None:
        return "No melody reference"

    low, high = result.note_range
    rhythms = ", ".join(c.value for c in result.rhythm.dominant(3)) or "none"
    return "\n".join([
        f"- Range: {low} - {high} ({pitch_label(low)} - {pitch_label(high)})",
        f"- Mode: {result.mode.detected_mode}",
        f"- Rhythm: {rhythms}",
    ])
