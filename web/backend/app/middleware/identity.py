"""FastAPI dependencies for the shared board service and client identity.

There are no accounts: a client is identified only by its IP address,
which the store hashes before keeping it.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request

from rudeshare.board.service import BoardService

# Shared service instance
_service: Optional[BoardService] = None

_FALLBACK_IP = "127.0.0.1"


def get_service() -> BoardService:
    """Return the singleton BoardService instance."""
    global _service
    if _service is None:
        _service = BoardService()
    return _service


def get_client_ip(request: Request) -> str:
    """Return the remote address of *request*, or loopback when unknown."""
    return request.client.host if request.client else _FALLBACK_IP
