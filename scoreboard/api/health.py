"""
Health check endpoint
"""
from fastapi import APIRouter, Depends

from scoreboard.api.deps import get_scoreboard
from scoreboard.state import Scoreboard


router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health_check(board: Scoreboard = Depends(get_scoreboard)):
    """Health check endpoint"""
    return {
        "status": "ok",
        **board.store.counts(),
    }
