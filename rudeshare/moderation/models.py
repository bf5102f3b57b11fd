"""Data models for the moderation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """Outcome of moderating one piece of content."""

    allowed = "allowed"
    banned_polite = "banned_polite"
    banned_illegal = "banned_illegal"


@dataclass(frozen=True)
class ModerationVerdict:
    """Result of a moderation check.

    ``flagged_terms`` keeps detection order: death-threat terms, then
    harassment terms for illegal content; polite words, then polite phrases
    otherwise. ``rudeness_score`` is always 0 for illegal content.
    """

    severity: Severity = Severity.allowed
    is_too_polite: bool = False
    is_death_threat: bool = False
    is_harassment: bool = False
    flagged_terms: tuple[str, ...] = field(default_factory=tuple)
    rudeness_score: int = 0

    @property
    def is_banned(self) -> bool:
        return self.severity is not Severity.allowed

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "is_too_polite": self.is_too_polite,
            "is_death_threat": self.is_death_threat,
            "is_harassment": self.is_harassment,
            "flagged_terms": list(self.flagged_terms),
            "rudeness_score": self.rudeness_score,
        }
