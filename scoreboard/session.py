"""
Game session flags: suspense mode and pause

Independent from the team/challenge data and never touched by a data reset.
"""
import logging
import threading
from typing import Optional

from scoreboard.models import SessionState


logger = logging.getLogger(__name__)


def _truthy(value) -> bool:
    """Truthiness as the browser client sees it: empty arrays and objects are true"""
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


class GameSession:
    """Holds the SessionState; writes are serialized on the given lock"""

    def __init__(self, lock: Optional[threading.RLock] = None):
        self._lock = lock or threading.RLock()
        self._state = SessionState()

    def set_suspense_mode(self, active) -> SessionState:
        """Hide (True) or show (False) points and ranking on the boards"""
        with self._lock:
            self._state.suspense_mode = _truthy(active)
            logger.info(f"Suspense mode {'on' if self._state.suspense_mode else 'off'}")
            return self._state.model_copy()

    def set_pause(self, resume_at) -> SessionState:
        """
        Pause the game until resume_at, or lift the pause

        A non-blank string is stored verbatim (no date validation); anything
        else clears the pause.
        """
        with self._lock:
            if isinstance(resume_at, str) and resume_at.strip():
                self._state.pause_until = resume_at
                logger.info(f"⏸️ Game paused until {resume_at}")
            else:
                self._state.pause_until = None
                logger.info("▶️ Pause cleared")
            return self._state.model_copy()

    def get_state(self) -> SessionState:
        with self._lock:
            return self._state.model_copy()
