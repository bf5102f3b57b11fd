"""Moderation-gated submission of posts and comments.

``BoardService`` is the only place the board talks to the moderation
engine: every post and comment is moderated exactly once, before it is
stored, and the verdict's rudeness score is persisted as-is.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from rudeshare.board.models import Comment, MediaType, PostView
from rudeshare.board.shame import HallOfShame
from rudeshare.board.store import BoardStore
from rudeshare.config import Settings
from rudeshare.moderation.models import ModerationVerdict, Severity
from rudeshare.moderation.moderator import generate_rude_response, moderate

logger = logging.getLogger(__name__)


class BoardError(Exception):
    """Base class for board submission errors."""


class InvalidContent(BoardError):
    """Submission is empty or too long."""


class ContentBanned(BoardError):
    """Submission was rejected by the moderation engine.

    ``rude_response`` is only set for content banned as too polite.
    """

    def __init__(self, verdict: ModerationVerdict, rude_response: Optional[str] = None) -> None:
        self.verdict = verdict
        self.rude_response = rude_response
        if verdict.severity is Severity.banned_illegal:
            message = "Content banned for legal reasons (death threats/harassment)"
        else:
            message = "Content banned for being too polite. This is RudeShare!"
        super().__init__(message)

    @property
    def flagged_terms(self) -> list[str]:
        return list(self.verdict.flagged_terms)


class BoardService:
    """Validates, moderates and stores submissions."""

    def __init__(
        self,
        store: Optional[BoardStore] = None,
        shame: Optional[HallOfShame] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self.store = store or BoardStore()
        self.shame = shame or HallOfShame(self.settings.shame_dir)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _screen(self, content: str, ip_address: str) -> ModerationVerdict:
        """Moderate *content*, raising ``ContentBanned`` unless allowed."""
        verdict = moderate(content)
        if verdict.severity is Severity.banned_illegal:
            logger.info("Banned illegal content, flagged %s", list(verdict.flagged_terms))
            raise ContentBanned(verdict)
        if verdict.severity is Severity.banned_polite:
            rude_response = generate_rude_response(verdict.flagged_terms)
            self.shame.record(content, verdict.flagged_terms, rude_response, ip_address)
            logger.info("Banned polite content, flagged %s", list(verdict.flagged_terms))
            raise ContentBanned(verdict, rude_response)
        return verdict

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def submit_post(
        self,
        content: str,
        ip_address: str,
        media_url: Optional[str] = None,
        media_type: Optional[MediaType | str] = None,
        challenge_response: bool = False,
    ) -> PostView:
        """Moderate and store a post.

        Raises ``InvalidContent`` for empty or oversized posts and
        ``ContentBanned`` when moderation rejects the text.
        """
        content = content.strip()
        if not content and not media_url:
            raise InvalidContent("Post must have content or media")
        if len(content) > self.settings.max_post_length:
            raise InvalidContent(
                f"Post content too long (max {self.settings.max_post_length} characters)"
            )

        verdict = self._screen(content, ip_address)
        view = self.store.create_post(
            content,
            verdict.rudeness_score,
            media_url=media_url,
            media_type=media_type,
            challenge_response=challenge_response,
        )
        if challenge_response:
            self.store.increment_challenge_responses(self.store.todays_challenge().id)
        if view.post.is_boosted:
            logger.info("Post %s boosted (rudeness %d)", view.post.post_code, verdict.rudeness_score)
        return view

    def submit_comment(self, post_id: int, content: str, ip_address: str) -> Comment:
        """Moderate and store a comment on *post_id*.

        Raises ``KeyError`` if the post does not exist.
        """
        content = content.strip()
        if not content:
            raise InvalidContent("Comment must have content")
        if len(content) > self.settings.max_comment_length:
            raise InvalidContent(
                f"Comment content too long (max {self.settings.max_comment_length} characters)"
            )
        if self.store.get_post(post_id) is None:
            raise KeyError(f"Post {post_id} not found")

        verdict = self._screen(content, ip_address)
        return self.store.create_comment(post_id, content, verdict.rudeness_score)

    def cleanup(self) -> int:
        return self.store.cleanup_old_posts(timedelta(days=self.settings.cleanup_days))

    def statistics(self):
        return self.store.statistics(banned_polite_count=self.shame.count())
