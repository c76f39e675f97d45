"""Tests for result formatting."""

import json

from melody_analyzer import MelodyAnalysisService
from melody_analyzer.output import (
    pitch_label,
    result_to_dict,
    file_info_to_dict,
    candidates_to_list,
    format_melody_info,
)


class TestFormatting:
    """Tests for dict and text renderings."""

    def test_pitch_label(self):
        assert pitch_label(60) == "C4"
        assert pitch_label(55) == "G3"
        assert pitch_label(73) == "C#5"

    def test_result_to_dict_is_json_ready(self, song_file):
        result = MelodyAnalysisService().analyze(song_file).unwrap()
        data = json.loads(json.dumps(result_to_dict(result)))

        assert data["track"] == {"index": 1, "name": "Lead Vocal"}
        assert data["total_notes"] == 40
        assert data["note_range"] == {"min": 55, "max": 72}
        assert list(data["rhythm"]) == [
            "whole", "half", "quarter", "eighth", "sixteenth", "triplet",
        ]
        assert list(data["intervals"]) == ["unison", "step", "small_leap", "large_leap"]
        assert data["mode"]["detected_mode"] == "A Minor"
        assert data["mode"]["tonic"] == "A"

    def test_file_info_to_dict(self, song_file):
        info = MelodyAnalysisService().get_file_info(song_file).unwrap()
        data = file_info_to_dict(info)

        assert data["track_count"] == 3
        assert data["tempo_bpm"] == 120

    def test_candidates_to_list(self, song_file):
        candidates = MelodyAnalysisService().rank_tracks(song_file).unwrap()
        data = candidates_to_list(candidates)

        assert [c["track_index"] for c in data] == [0, 1, 2]
        assert data[1]["pitch_range"] == [55, 72]


class TestMelodyInfo:
    """Tests for the short melody summary."""

    def test_no_result(self):
        assert format_melody_info(None) == "No melody reference"

    def test_summary(self, song_file):
        result = MelodyAnalysisService().analyze(song_file).unwrap()
        lines = format_melody_info(result).splitlines()

        assert lines == [
            "- Range: 55 - 72 (G3 - C5)",
            "- Mode: A Minor",
            "- Rhythm: quarter",
        ]
