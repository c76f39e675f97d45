"""Global constants for Melody Analyzer."""

# Pitch names
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# MIDI defaults
DEFAULT_TICKS_PER_QUARTER = 480
DEFAULT_TEMPO_US = 500000  # microseconds per beat (120 BPM)

# Vocal range C3-C6
VOCAL_RANGE = (48, 84)

# Track-name keywords for vocal tracks (English and Chinese)
VOCAL_KEYWORDS = (
    "vocal", "voice", "sing", "melody", "lead",
    "人声", "主旋律", "主唱", "vocalist",
)

# Scale templates (semitone offsets from tonic)
MAJOR_SCALE = (0, 2, 4, 5, 7, 9, 11)
MINOR_SCALE = (0, 2, 3, 5, 7, 8, 10)  # Natural minor
PENTATONIC_SCALE = (0, 2, 4, 7, 9)
