"""Content moderation and rudeness scoring.

The engine is a set of pure functions over constant lexicons:

- ``moderate`` classifies text as allowed, too polite or illegal
- ``calculate_rudeness_score`` rates how brutal a text is (0-100)
- ``generate_rude_response`` mocks a polite submitter
"""

from rudeshare.moderation.models import ModerationVerdict, Severity
from rudeshare.moderation.moderator import (
    calculate_rudeness_score,
    generate_rude_response,
    is_boosted,
    moderate,
)

__all__ = [
    "ModerationVerdict",
    "Severity",
    "calculate_rudeness_score",
    "generate_rude_response",
    "is_boosted",
    "moderate",
]
