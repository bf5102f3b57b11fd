"""Comments router -- voting on comments.

Prefix: ``/api/comments``
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from rudeshare.board.service import BoardService
from web.backend.app.middleware.identity import get_client_ip, get_service
from web.backend.app.models.api import VoteRequest, VoteResponse

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.post("/{comment_id}/vote", response_model=VoteResponse, status_code=status.HTTP_201_CREATED)
def vote_comment(
    comment_id: int,
    request: VoteRequest,
    service: BoardService = Depends(get_service),
    client_ip: str = Depends(get_client_ip),
):
    try:
        vote = service.store.create_comment_vote(comment_id, request.vote_type, client_ip)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Comment {comment_id} not found")
    if vote is None:
        raise HTTPException(status_code=409, detail="You have already voted on this comment")
    return VoteResponse(
        id=vote.id, target_id=vote.comment_id, vote_type=vote.vote_type, created_at=vote.created_at
    )
