"""Output layer - MIDI export and result formatting."""

from .midi import MelodyExporter
from .report import (
    result_to_dict,
    file_info_to_dict,
    candidates_to_list,
    format_melody_info,
    pitch_label,
)

__all__ = [
    "MelodyExporter",
    "result_to_dict",
    "file_info_to_dict",
    "candidates_to_list",
    "format_melody_info",
    "pitch_label",
]
