"""
Admin endpoints
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from scoreboard.api.deps import get_scoreboard
from scoreboard.seed_loader import SeedDataError
from scoreboard.state import Scoreboard


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["admin"])


@router.get("/reset")
def reset_data(board: Scoreboard = Depends(get_scoreboard)):
    """
    Reload teams, challenges and hints from the seed files

    Suspense mode and pause are kept. If the seed files cannot be read the
    current data stays in place.

    Runs in the threadpool; only the final swap takes the store lock.
    """
    try:
        board.store.reset()
    except (FileNotFoundError, SeedDataError) as e:
        logger.error(f"❌ Reset failed, keeping current data: {e}")
        raise HTTPException(status_code=500, detail=f"Reset failed: {e}") from e

    logger.info("🔄 Game data reset from seed files")
    return {"success": True}
