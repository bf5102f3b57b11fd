"""Posts router -- feed, search, submission, votes, reactions, reports, comments.

Prefix: ``/api/posts``
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from rudeshare.board.models import CommentSort, PostSort
from rudeshare.board.service import BoardService, ContentBanned, InvalidContent
from web.backend.app.middleware.identity import get_client_ip, get_service
from web.backend.app.models.api import (
    CommentResponse,
    CreateCommentRequest,
    CreatePostRequest,
    MessageResponse,
    PostResponse,
    ReactionRequest,
    ReactionResponse,
    ReportRequest,
    VoteRequest,
    VoteResponse,
)

router = APIRouter(prefix="/api/posts", tags=["posts"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def banned_exception(exc: ContentBanned) -> HTTPException:
    """Map a moderation ban to a 403 carrying the flagged terms."""
    detail = {"message": str(exc), "flagged_terms": exc.flagged_terms}
    if exc.rude_response is not None:
        detail["rude_response"] = exc.rude_response
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def _not_found(post_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Post {post_id} not found")


# ---------------------------------------------------------------------------
# Feed
# ---------------------------------------------------------------------------


@router.get("", response_model=list[PostResponse])
def list_posts(
    sort: PostSort = Query(PostSort.newest),
    service: BoardService = Depends(get_service),
):
    """Return every post in the requested order."""
    return [PostResponse.from_view(v) for v in service.store.list_posts(sort)]


@router.get("/search", response_model=list[PostResponse])
def search_posts(
    q: str = Query(""),
    service: BoardService = Depends(get_service),
):
    """Search posts by content or post code."""
    if not q:
        raise HTTPException(status_code=400, detail="Search query is required")
    return [PostResponse.from_view(v) for v in service.store.search_posts(q)]


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: int, service: BoardService = Depends(get_service)):
    view = service.store.get_post(post_id)
    if view is None:
        raise _not_found(post_id)
    return PostResponse.from_view(view)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    request: CreatePostRequest,
    service: BoardService = Depends(get_service),
    client_ip: str = Depends(get_client_ip),
):
    """Submit a post.

    Polite or illegal content is rejected with 403; polite content also
    lands in the Hall of Shame along with a rude response.
    """
    try:
        view = service.submit_post(
            request.content,
            client_ip,
            media_url=request.media_url,
            media_type=request.media_type,
            challenge_response=request.challenge_response,
        )
    except InvalidContent as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except ContentBanned as exc:
        raise banned_exception(exc)
    return PostResponse.from_view(view)


# ---------------------------------------------------------------------------
# Votes, reactions, reports
# ---------------------------------------------------------------------------


@router.post("/{post_id}/vote", response_model=VoteResponse, status_code=status.HTTP_201_CREATED)
def vote_post(
    post_id: int,
    request: VoteRequest,
    service: BoardService = Depends(get_service),
    client_ip: str = Depends(get_client_ip),
):
    try:
        vote = service.store.create_vote(post_id, request.vote_type, client_ip)
    except KeyError:
        raise _not_found(post_id)
    if vote is None:
        raise HTTPException(status_code=409, detail="You have already voted on this post")
    return VoteResponse(
        id=vote.id, target_id=vote.post_id, vote_type=vote.vote_type, created_at=vote.created_at
    )


@router.post("/{post_id}/react", response_model=ReactionResponse, status_code=status.HTTP_201_CREATED)
def react_post(
    post_id: int,
    request: ReactionRequest,
    response: Response,
    service: BoardService = Depends(get_service),
    client_ip: str = Depends(get_client_ip),
):
    """Toggle a reaction: 201 when added, 200 when an existing one is removed."""
    try:
        reaction = service.store.toggle_reaction(post_id, request.reaction_type, client_ip)
    except KeyError:
        raise _not_found(post_id)
    if reaction is None:
        response.status_code = status.HTTP_200_OK
    return ReactionResponse(
        post_id=post_id,
        reaction_type=request.reaction_type,
        added=reaction is not None,
        reactions=service.store.get_reactions(post_id),
    )


@router.post("/{post_id}/report", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def report_post(
    post_id: int,
    request: ReportRequest,
    service: BoardService = Depends(get_service),
    client_ip: str = Depends(get_client_ip),
):
    try:
        service.store.create_report(post_id, request.reason, client_ip)
    except KeyError:
        raise _not_found(post_id)
    return MessageResponse(message="Post reported successfully")


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
def list_comments(
    post_id: int,
    sort: CommentSort = Query(CommentSort.newest),
    service: BoardService = Depends(get_service),
):
    return [CommentResponse.from_comment(c) for c in service.store.list_comments(post_id, sort)]


@router.post(
    "/{post_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED
)
def create_comment(
    post_id: int,
    request: CreateCommentRequest,
    service: BoardService = Depends(get_service),
    client_ip: str = Depends(get_client_ip),
):
    try:
        comment = service.submit_comment(post_id, request.content, client_ip)
    except InvalidContent as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except ContentBanned as exc:
        raise banned_exception(exc)
    except KeyError:
        raise _not_found(post_id)
    return CommentResponse.from_comment(comment)
