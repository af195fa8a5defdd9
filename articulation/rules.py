"""Default thresholds for alignment and hesitation detection."""
from __future__ import annotations

# Maximum Levenshtein distance for a fuzzy (accepted) match
FUZZY_MATCH_THRESHOLD = 2

# Correct matches below this ASR confidence are flagged as low confidence
MIN_CONFIDENCE = 0.3

# Confidence assumed when the ASR does not report one
DEFAULT_CONFIDENCE = 0.9

# A gap is a long pause once it exceeds the average gap by this factor...
LONG_PAUSE_MULTIPLIER = 1.5

# ...and is at least this long
MIN_PAUSE_MS = 500

# Words either side of a hesitation included in its context string
CONTEXT_RADIUS = 2

# Filler words (language-agnostic common ones)
FILLER_WORDS = frozenset(
    {"um", "uh", "er", "ah", "hmm", "like", "you know", "so", "well", "actually"}
)
