"""In-memory storage for the board.

Holds posts, comments, votes, reactions, reports and daily challenges in
process memory behind a single lock. Client IPs are never stored, only
their SHA-256 hash, which is enough to de-duplicate votes and reactions.
"""

from __future__ import annotations

import hashlib
import logging
import math
import random
import string
import threading
from datetime import datetime, timedelta
from typing import Optional

from rudeshare.board.challenges import challenge_for_day
from rudeshare.board.models import (
    REACTION_WEIGHTS,
    BoardStatistics,
    Comment,
    CommentSort,
    CommentVote,
    DailyChallenge,
    MediaType,
    Post,
    PostSort,
    PostView,
    Reaction,
    ReactionType,
    Report,
    Vote,
    VoteType,
    utcnow,
)
from rudeshare.moderation.moderator import is_boosted

logger = logging.getLogger(__name__)

_CODE_ALPHABET = string.ascii_uppercase + string.digits
_CODE_LENGTH = 6

# Window used to count "active users" in the statistics
_ACTIVE_WINDOW = timedelta(hours=1)


def hash_ip(ip_address: str) -> str:
    """Return the hex SHA-256 digest used as an anonymous client identity."""
    return hashlib.sha256(ip_address.encode("utf-8")).hexdigest()


def _random_code(prefix: str) -> str:
    return prefix + "".join(random.choice(_CODE_ALPHABET) for _ in range(_CODE_LENGTH))


class BoardStore:
    """Process-local board storage.

    Mutating methods take the store lock; read methods return copies of the
    internal lists so callers may sort or filter them freely.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._posts: dict[int, Post] = {}
        self._comments: dict[int, Comment] = {}
        self._votes: dict[int, Vote] = {}
        self._comment_votes: dict[int, CommentVote] = {}
        self._reactions: dict[int, Reaction] = {}
        self._reports: dict[int, Report] = {}
        self._challenges: dict[int, DailyChallenge] = {}
        self._next_ids: dict[str, int] = {}

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _next_id(self, kind: str) -> int:
        value = self._next_ids.get(kind, 1)
        self._next_ids[kind] = value + 1
        return value

    def _require_post(self, post_id: int) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise KeyError(f"Post {post_id} not found")
        return post

    def _require_comment(self, comment_id: int) -> Comment:
        comment = self._comments.get(comment_id)
        if comment is None:
            raise KeyError(f"Comment {comment_id} not found")
        return comment

    def _reaction_counts(self, post_id: int) -> dict[str, int]:
        counts: dict[str, int] = {}
        for reaction in self._reactions.values():
            if reaction.post_id == post_id:
                key = reaction.reaction_type.value
                counts[key] = counts.get(key, 0) + 1
        return counts

    def _view(self, post: Post) -> PostView:
        reactions = self._reaction_counts(post.id)
        return PostView(
            post=post,
            reactions=reactions,
            brutality_percentage=self.brutality_percentage(post, reactions),
            comment_count=sum(1 for c in self._comments.values() if c.post_id == post.id),
        )

    @staticmethod
    def brutality_percentage(post: Post, reactions: dict[str, int]) -> int:
        """Rudeness score adjusted by weighted reactions, clamped to 0-100."""
        score = post.rudeness_score
        for reaction_type, count in reactions.items():
            score += REACTION_WEIGHTS.get(ReactionType(reaction_type), 0) * count
        return max(0, min(score, 100))

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------

    def create_post(
        self,
        content: str,
        rudeness_score: int,
        media_url: Optional[str] = None,
        media_type: Optional[MediaType] = None,
        challenge_response: bool = False,
    ) -> PostView:
        """Persist an allowed post with its rudeness score."""
        with self._lock:
            post = Post(
                id=self._next_id("post"),
                post_code=_random_code("#"),
                content=content,
                rudeness_score=rudeness_score,
                is_boosted=is_boosted(rudeness_score),
                media_url=media_url,
                media_type=MediaType(media_type) if media_type else None,
                challenge_response=challenge_response,
            )
            self._posts[post.id] = post
            return self._view(post)

    def get_post(self, post_id: int) -> Optional[PostView]:
        with self._lock:
            post = self._posts.get(post_id)
            return self._view(post) if post else None

    def list_posts(self, sort: PostSort | str = PostSort.newest) -> list[PostView]:
        sort = PostSort(sort)
        with self._lock:
            views = [self._view(p) for p in self._posts.values()]

        if sort is PostSort.oldest:
            views.sort(key=lambda v: v.post.created_at)
        elif sort is PostSort.popular:
            views.sort(key=lambda v: v.post.score, reverse=True)
        elif sort is PostSort.controversial:
            views.sort(key=lambda v: v.total_reactions, reverse=True)
        else:
            views.sort(key=lambda v: v.post.created_at, reverse=True)
        return views

    def search_posts(self, query: str) -> list[PostView]:
        """Case-insensitive search over post content and post codes."""
        needle = query.lower()
        return [
            v
            for v in self.list_posts()
            if needle in v.post.content.lower() or needle in v.post.post_code.lower()
        ]

    def cleanup_old_posts(self, max_age: timedelta, now: Optional[datetime] = None) -> int:
        """Delete posts older than *max_age* that nobody voted up or down.

        Votes, reactions, reports and comments of a deleted post go with it.
        Returns the number of posts removed.
        """
        cutoff = (now or utcnow()) - max_age
        with self._lock:
            stale = [
                pid
                for pid, post in self._posts.items()
                if post.created_at < cutoff and post.score == 0
            ]
            for pid in stale:
                del self._posts[pid]
                self._votes = {k: v for k, v in self._votes.items() if v.post_id != pid}
                self._reactions = {k: r for k, r in self._reactions.items() if r.post_id != pid}
                self._reports = {k: r for k, r in self._reports.items() if r.post_id != pid}
                dropped = {cid for cid, c in self._comments.items() if c.post_id == pid}
                self._comments = {k: c for k, c in self._comments.items() if k not in dropped}
                self._comment_votes = {
                    k: v for k, v in self._comment_votes.items() if v.comment_id not in dropped
                }
        if stale:
            logger.info("Cleaned up %d stale posts", len(stale))
        return len(stale)

    # ------------------------------------------------------------------
    # Votes, reactions, reports
    # ------------------------------------------------------------------

    def has_voted(self, post_id: int, ip_address: str) -> bool:
        ip_hash = hash_ip(ip_address)
        with self._lock:
            return any(
                v.post_id == post_id and v.ip_hash == ip_hash for v in self._votes.values()
            )

    def create_vote(self, post_id: int, vote_type: VoteType | str, ip_address: str) -> Optional[Vote]:
        """Record a vote, or return ``None`` if this client already voted."""
        vote_type = VoteType(vote_type)
        with self._lock:
            post = self._require_post(post_id)
            if self.has_voted(post_id, ip_address):
                return None
            vote = Vote(
                id=self._next_id("vote"),
                post_id=post_id,
                vote_type=vote_type,
                ip_hash=hash_ip(ip_address),
            )
            self._votes[vote.id] = vote
            post.score += vote_type.delta
            return vote

    def toggle_reaction(
        self, post_id: int, reaction_type: ReactionType | str, ip_address: str
    ) -> Optional[Reaction]:
        """Add a reaction, or remove it if this client already gave it.

        Returns the new reaction, or ``None`` when an existing one was removed.
        """
        reaction_type = ReactionType(reaction_type)
        ip_hash = hash_ip(ip_address)
        with self._lock:
            self._require_post(post_id)
            for rid, existing in self._reactions.items():
                if (
                    existing.post_id == post_id
                    and existing.reaction_type is reaction_type
                    and existing.ip_hash == ip_hash
                ):
                    del self._reactions[rid]
                    return None
            reaction = Reaction(
                id=self._next_id("reaction"),
                post_id=post_id,
                reaction_type=reaction_type,
                ip_hash=ip_hash,
            )
            self._reactions[reaction.id] = reaction
            return reaction

    def get_reactions(self, post_id: int) -> dict[str, int]:
        with self._lock:
            return self._reaction_counts(post_id)

    def create_report(self, post_id: int, reason: Optional[str], ip_address: str) -> Report:
        with self._lock:
            post = self._require_post(post_id)
            report = Report(
                id=self._next_id("report"),
                post_id=post_id,
                ip_hash=hash_ip(ip_address),
                reason=reason or None,
            )
            self._reports[report.id] = report
            post.report_count += 1
        logger.info("Post %d reported (%d reports)", post_id, post.report_count)
        return report

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def list_comments(self, post_id: int, sort: CommentSort | str = CommentSort.newest) -> list[Comment]:
        sort = CommentSort(sort)
        with self._lock:
            comments = [c for c in self._comments.values() if c.post_id == post_id]

        if sort is CommentSort.oldest:
            comments.sort(key=lambda c: c.created_at)
        elif sort is CommentSort.popular:
            comments.sort(key=lambda c: c.score, reverse=True)
        else:
            comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    def create_comment(self, post_id: int, content: str, rudeness_score: int) -> Comment:
        with self._lock:
            self._require_post(post_id)
            comment = Comment(
                id=self._next_id("comment"),
                post_id=post_id,
                comment_code=_random_code("#C"),
                content=content,
                rudeness_score=rudeness_score,
            )
            self._comments[comment.id] = comment
            return comment

    def create_comment_vote(
        self, comment_id: int, vote_type: VoteType | str, ip_address: str
    ) -> Optional[CommentVote]:
        """Record a comment vote, or return ``None`` on a duplicate."""
        vote_type = VoteType(vote_type)
        ip_hash = hash_ip(ip_address)
        with self._lock:
            comment = self._require_comment(comment_id)
            if any(
                v.comment_id == comment_id and v.ip_hash == ip_hash
                for v in self._comment_votes.values()
            ):
                return None
            vote = CommentVote(
                id=self._next_id("comment_vote"),
                comment_id=comment_id,
                vote_type=vote_type,
                ip_hash=ip_hash,
            )
            self._comment_votes[vote.id] = vote
            comment.score += vote_type.delta
            return vote

    # ------------------------------------------------------------------
    # Daily challenge
    # ------------------------------------------------------------------

    def todays_challenge(self) -> DailyChallenge:
        """Return today's active challenge, creating it on first access."""
        today = utcnow().date()
        with self._lock:
            for challenge in self._challenges.values():
                if challenge.date == today.isoformat() and challenge.is_active:
                    return challenge
            challenge = DailyChallenge(
                id=self._next_id("challenge"),
                prompt=challenge_for_day(today),
                date=today.isoformat(),
            )
            self._challenges[challenge.id] = challenge
            return challenge

    def increment_challenge_responses(self, challenge_id: int) -> None:
        with self._lock:
            challenge = self._challenges.get(challenge_id)
            if challenge is not None:
                challenge.response_count += 1

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def statistics(self, banned_polite_count: int = 0, now: Optional[datetime] = None) -> BoardStatistics:
        now = now or utcnow()
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        since = now - _ACTIVE_WINDOW
        with self._lock:
            posts = list(self._posts.values())
            active = {
                item.ip_hash
                for group in (self._votes, self._reactions, self._comment_votes)
                for item in group.values()
                if item.created_at >= since
            }
            total_comments = len(self._comments)

        avg = math.floor(sum(p.rudeness_score for p in posts) / len(posts) + 0.5) if posts else 0
        return BoardStatistics(
            total_posts=len(posts),
            posts_today=sum(1 for p in posts if p.created_at >= midnight),
            active_users=len(active),
            avg_rudeness_score=avg,
            banned_polite_count=banned_polite_count,
            total_comments=total_comments,
        )
