"""Pydantic models for API request/response serialization.

These models mirror the rudeshare dataclasses and provide proper JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from rudeshare.board.models import (
    BoardStatistics,
    Comment,
    DailyChallenge,
    MediaType,
    PostView,
    ReactionType,
    ShameEntry,
    VoteType,
)
from rudeshare.moderation.models import ModerationVerdict, Severity


# ---------------------------------------------------------------------------
# Moderation
# ---------------------------------------------------------------------------


class ModerateRequest(BaseModel):
    content: str = ""


class ModerationVerdictResponse(BaseModel):
    """Mirrors rudeshare.moderation.models.ModerationVerdict."""

    severity: Severity = Severity.allowed
    is_too_polite: bool = False
    is_death_threat: bool = False
    is_harassment: bool = False
    flagged_terms: list[str] = Field(default_factory=list)
    rudeness_score: int = 0

    @classmethod
    def from_verdict(cls, verdict: ModerationVerdict) -> "ModerationVerdictResponse":
        return cls(**verdict.to_dict())


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


class CreatePostRequest(BaseModel):
    content: str = ""
    media_url: Optional[str] = None
    media_type: Optional[MediaType] = None
    challenge_response: bool = False


class PostResponse(BaseModel):
    """Mirrors rudeshare.board.models.PostView."""

    id: int
    post_code: str
    content: str
    score: int = 0
    report_count: int = 0
    rudeness_score: int = 0
    is_boosted: bool = False
    media_url: Optional[str] = None
    media_type: Optional[MediaType] = None
    challenge_response: bool = False
    created_at: datetime
    reactions: dict[str, int] = Field(default_factory=dict)
    brutality_percentage: int = 0
    comment_count: int = 0

    @classmethod
    def from_view(cls, view: PostView) -> "PostResponse":
        post = view.post
        return cls(
            id=post.id,
            post_code=post.post_code,
            content=post.content,
            score=post.score,
            report_count=post.report_count,
            rudeness_score=post.rudeness_score,
            is_boosted=post.is_boosted,
            media_url=post.media_url,
            media_type=post.media_type,
            challenge_response=post.challenge_response,
            created_at=post.created_at,
            reactions=view.reactions,
            brutality_percentage=view.brutality_percentage,
            comment_count=view.comment_count,
        )


class VoteRequest(BaseModel):
    vote_type: VoteType


class VoteResponse(BaseModel):
    id: int
    target_id: int
    vote_type: VoteType
    created_at: datetime


class ReactionRequest(BaseModel):
    reaction_type: ReactionType


class ReactionResponse(BaseModel):
    post_id: int
    reaction_type: ReactionType
    added: bool
    reactions: dict[str, int] = Field(default_factory=dict)


class ReportRequest(BaseModel):
    reason: Optional[str] = Field(default=None, max_length=500)


class MessageResponse(BaseModel):
    message: str


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class CreateCommentRequest(BaseModel):
    content: str = ""


class CommentResponse(BaseModel):
    """Mirrors rudeshare.board.models.Comment."""

    id: int
    post_id: int
    comment_code: str
    content: str
    score: int = 0
    rudeness_score: int = 0
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            comment_code=comment.comment_code,
            content=comment.content,
            score=comment.score,
            rudeness_score=comment.rudeness_score,
            created_at=comment.created_at,
        )


# ---------------------------------------------------------------------------
# Community
# ---------------------------------------------------------------------------


class ShameEntryResponse(BaseModel):
    """Mirrors rudeshare.board.models.ShameEntry, without the IP hash."""

    id: str
    timestamp: str
    content: str
    flagged_terms: list[str] = Field(default_factory=list)
    rude_response: str = ""

    @classmethod
    def from_entry(cls, entry: ShameEntry) -> "ShameEntryResponse":
        return cls(
            id=entry.id,
            timestamp=entry.timestamp,
            content=entry.content,
            flagged_terms=entry.flagged_terms,
            rude_response=entry.rude_response,
        )


class DailyChallengeResponse(BaseModel):
    id: int
    prompt: str
    date: str
    is_active: bool = True
    response_count: int = 0

    @classmethod
    def from_challenge(cls, challenge: DailyChallenge) -> "DailyChallengeResponse":
        return cls(
            id=challenge.id,
            prompt=challenge.prompt,
            date=challenge.date,
            is_active=challenge.is_active,
            response_count=challenge.response_count,
        )


class StatisticsResponse(BaseModel):
    """Mirrors rudeshare.board.models.BoardStatistics."""

    total_posts: int = 0
    posts_today: int = 0
    active_users: int = 0
    avg_rudeness_score: int = 0
    banned_polite_count: int = 0
    total_comments: int = 0

    @classmethod
    def from_stats(cls, stats: BoardStatistics) -> "StatisticsResponse":
        return cls(
            total_posts=stats.total_posts,
            posts_today=stats.posts_today,
            active_users=stats.active_users,
            avg_rudeness_score=stats.avg_rudeness_score,
            banned_polite_count=stats.banned_polite_count,
            total_comments=stats.total_comments,
        )
