"""Moderation router -- dry-run the moderation engine on arbitrary text.

Prefix: ``/api/moderate``
"""

from __future__ import annotations

from fastapi import APIRouter

from rudeshare.moderation.moderator import moderate
from web.backend.app.models.api import ModerateRequest, ModerationVerdictResponse

router = APIRouter(prefix="/api/moderate", tags=["moderation"])


@router.post("", response_model=ModerationVerdictResponse)
def moderate_text(request: ModerateRequest):
    """Return the verdict for *content* without storing anything."""
    return ModerationVerdictResponse.from_verdict(moderate(request.content.strip()))
