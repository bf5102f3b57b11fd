"""Content moderation engine.

Classifies submitted text in strict priority order:

1. Death threats and harassment ban the content outright (score 0).
2. Two or more polite words/phrases ban it as too polite.
3. Everything else is allowed and receives a rudeness score.

All functions here are pure; lexicons live in
:mod:`rudeshare.moderation.lexicons`.
"""

from __future__ import annotations

import random
from typing import Iterable, Sequence

from rudeshare.moderation.lexicons import (
    DEATH_THREAT_WORDS,
    HARASSMENT_WORDS,
    INTENSIFIERS,
    POLITE_PHRASES,
    POLITE_WORDS,
    RUDE_WORDS,
)
from rudeshare.moderation.models import ModerationVerdict, Severity

# Two or more polite matches bans the content
POLITENESS_THRESHOLD = 2

BOOST_THRESHOLD = 80

# Scoring weights
_RUDE_WORD_POINTS = 5
_INTENSIFIER_POINTS = 3
_CAPS_RATIO_LIMIT = 0.3
_CAPS_BONUS = 15
_EXCLAMATION_POINTS = 2
_AGGRESSIVE_PUNCTUATION_BONUS = 10
_RANT_LENGTH = 200
_RANT_POINTS_PER_100 = 2
_MAX_SCORE = 100

_RUDE_RESPONSES: tuple[str, ...] = (
    "Cut the {term} crap. This isn't kindergarten.",
    "Nobody wants your fake {term} BS here.",
    "Save your {term} garbage for Facebook.",
    "This is RudeShare, not your grandmother's tea party.",
    "Keep your soft {term} nonsense to yourself.",
)


def _matches(text: str, terms: Iterable[str]) -> list[str]:
    """Return the terms contained in *text*, in lexicon order."""
    return [term for term in terms if term in text]


def moderate(content: str) -> ModerationVerdict:
    """Classify *content* and compute its rudeness score.

    Matching is case-insensitive substring search with no tokenization, so
    "diet" trips the "die" death-threat term.  Never raises.
    """
    normalized = content.lower()

    death_threats = _matches(normalized, DEATH_THREAT_WORDS)
    harassment = _matches(normalized, HARASSMENT_WORDS)
    if death_threats or harassment:
        return ModerationVerdict(
            severity=Severity.banned_illegal,
            is_death_threat=bool(death_threats),
            is_harassment=bool(harassment),
            flagged_terms=tuple(death_threats + harassment),
            rudeness_score=0,
        )

    polite_words = _matches(normalized, POLITE_WORDS)
    polite_phrases = _matches(normalized, POLITE_PHRASES)
    is_too_polite = len(polite_words) + len(polite_phrases) >= POLITENESS_THRESHOLD

    return ModerationVerdict(
        severity=Severity.banned_polite if is_too_polite else Severity.allowed,
        is_too_polite=is_too_polite,
        flagged_terms=tuple(polite_words + polite_phrases),
        rudeness_score=calculate_rudeness_score(content),
    )


def calculate_rudeness_score(content: str) -> int:
    """Score how brutal *content* is on a 0-100 scale.

    Word counts are taken on the lowercased text; the caps ratio and
    punctuation bonuses look at the text as written.
    """
    normalized = content.lower()
    score = 0

    for word in RUDE_WORDS:
        score += normalized.count(word) * _RUDE_WORD_POINTS
    for word in INTENSIFIERS:
        score += normalized.count(word) * _INTENSIFIER_POINTS

    # Shouting
    if content:
        uppercase = sum(1 for ch in content if "A" <= ch <= "Z")
        if uppercase / len(content) > _CAPS_RATIO_LIMIT:
            score += _CAPS_BONUS

    exclamations = content.count("!")
    if exclamations > 1:
        score += exclamations * _EXCLAMATION_POINTS

    if "!!!" in content or "???" in content:
        score += _AGGRESSIVE_PUNCTUATION_BONUS

    # Sustained rants
    if len(content) > _RANT_LENGTH:
        score += (len(content) // 100) * _RANT_POINTS_PER_100

    return max(0, min(score, _MAX_SCORE))


def is_boosted(rudeness_score: int) -> bool:
    """Whether an allowed post is rude enough to be boosted in the feed."""
    return rudeness_score >= BOOST_THRESHOLD


def generate_rude_response(flagged_terms: Sequence[str]) -> str:
    """Pick a random insult aimed at the first flagged polite term.

    Raises ``ValueError`` when *flagged_terms* is empty; callers only use
    this after a ``banned_polite`` verdict, which always flags two terms.
    """
    if not flagged_terms:
        raise ValueError("generate_rude_response needs at least one flagged term")
    template = random.choice(_RUDE_RESPONSES)
    return template.format(term=flagged_terms[0])
