"""Board domain models: posts, comments, votes, reactions and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VoteType(str, Enum):
    up = "up"
    down = "down"

    @property
    def delta(self) -> int:
        return 1 if self is VoteType.up else -1


class ReactionType(str, Enum):
    """Reactions a reader can toggle on a post."""

    savage = "savage"
    brutal = "brutal"
    middle_finger = "middle_finger"
    legendary = "legendary"
    trash = "trash"
    boring = "boring"


# Contribution of each reaction to a post's brutality percentage
REACTION_WEIGHTS: dict[ReactionType, int] = {
    ReactionType.savage: 20,
    ReactionType.brutal: 18,
    ReactionType.middle_finger: 15,
    ReactionType.legendary: 12,
    ReactionType.trash: -5,
    ReactionType.boring: -10,
}


class MediaType(str, Enum):
    image = "image"
    video = "video"


class PostSort(str, Enum):
    newest = "newest"
    oldest = "oldest"
    popular = "popular"
    controversial = "controversial"


class CommentSort(str, Enum):
    newest = "newest"
    oldest = "oldest"
    popular = "popular"


@dataclass
class Post:
    """An allowed, persisted post.

    ``post_code`` is the public anonymous handle (``#A7B9C2``); ``id`` is the
    internal sequence number used in URLs.
    """

    id: int
    post_code: str
    content: str
    rudeness_score: int = 0
    is_boosted: bool = False
    score: int = 0
    report_count: int = 0
    media_url: Optional[str] = None
    media_type: Optional[MediaType] = None
    challenge_response: bool = False
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class PostView:
    """A post together with the figures derived from its reactions."""

    post: Post
    reactions: dict[str, int] = field(default_factory=dict)
    brutality_percentage: int = 0
    comment_count: int = 0

    @property
    def total_reactions(self) -> int:
        return sum(self.reactions.values())


@dataclass
class Comment:
    id: int
    post_id: int
    comment_code: str
    content: str
    rudeness_score: int = 0
    score: int = 0
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Vote:
    id: int
    post_id: int
    vote_type: VoteType
    ip_hash: str
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class CommentVote:
    id: int
    comment_id: int
    vote_type: VoteType
    ip_hash: str
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Reaction:
    id: int
    post_id: int
    reaction_type: ReactionType
    ip_hash: str
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Report:
    id: int
    post_id: int
    ip_hash: str
    reason: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class DailyChallenge:
    id: int
    prompt: str
    date: str  # ISO day, UTC
    is_active: bool = True
    response_count: int = 0
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class ShameEntry:
    """A post rejected for politeness, kept in the Hall of Shame."""

    id: str
    timestamp: str
    content: str
    flagged_terms: list[str] = field(default_factory=list)
    rude_response: str = ""
    ip_hash: str = ""


@dataclass
class BoardStatistics:
    total_posts: int = 0
    posts_today: int = 0
    active_users: int = 0
    avg_rudeness_score: int = 0
    banned_polite_count: int = 0
    total_comments: int = 0
