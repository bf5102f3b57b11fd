"""FastAPI application for the RudeShare board.

Provides REST API endpoints wrapping the rudeshare package for:
- Posting, voting, reacting, reporting and commenting
- The Hall of Shame of content banned for politeness
- The daily brutal challenge and board statistics
- Dry-run moderation of arbitrary text
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rudeshare import __version__
from rudeshare.config import Settings
from rudeshare.log import configure_logging
from web.backend.app.routers import comments, community, moderation, posts

configure_logging(Settings.from_env().log_level)

app = FastAPI(
    title="RudeShare API",
    description=(
        "REST API for RudeShare, the anonymous board that bans politeness. "
        "Provides endpoints for posts, comments, votes, reactions, the Hall "
        "of Shame and the daily challenge."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(posts.router)
app.include_router(comments.router)
app.include_router(community.router)
app.include_router(moderation.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "RudeShare API",
        "version": __version__,
        "description": "Anonymous board where politeness gets you banned",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
