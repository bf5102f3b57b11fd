"""Community router -- Hall of Shame, daily challenge, statistics, cleanup.

Prefix: ``/api``
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from rudeshare.board.service import BoardService
from web.backend.app.middleware.identity import get_service
from web.backend.app.models.api import (
    DailyChallengeResponse,
    MessageResponse,
    ShameEntryResponse,
    StatisticsResponse,
)

router = APIRouter(prefix="/api", tags=["community"])


@router.get("/hall-of-shame", response_model=list[ShameEntryResponse])
def hall_of_shame(
    limit: int = Query(20, ge=1, le=200),
    service: BoardService = Depends(get_service),
):
    """Most recent posts banned for being too polite."""
    return [ShameEntryResponse.from_entry(e) for e in service.shame.list_entries(limit)]


@router.get("/daily-challenge", response_model=DailyChallengeResponse)
def daily_challenge(service: BoardService = Depends(get_service)):
    return DailyChallengeResponse.from_challenge(service.store.todays_challenge())


@router.get("/statistics", response_model=StatisticsResponse)
def statistics(service: BoardService = Depends(get_service)):
    return StatisticsResponse.from_stats(service.statistics())


@router.post("/cleanup", response_model=MessageResponse)
def cleanup(service: BoardService = Depends(get_service)):
    """Delete stale posts nobody voted on."""
    deleted = service.cleanup()
    return MessageResponse(message=f"Cleaned up {deleted} old posts")
