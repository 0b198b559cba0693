"""
Time-windowed hint query
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from scoreboard.models import HintSchedule


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp

    A trailing 'Z' is accepted; values without an offset are read as UTC.

    Returns:
        Aware datetime, or None if value is not a parseable string
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def active_hints(
    hints: HintSchedule,
    now: Optional[datetime] = None,
    challenge_id: Optional[str] = None,
) -> List[Dict]:
    """
    Hints visible at `now`

    A window is visible when revealAt <= now < endAt. Windows whose bounds do
    not parse are skipped.

    Args:
        hints: Schedule (challenge id -> hint groups -> windows)
        now: Instant to evaluate, defaults to the current time
        challenge_id: Restrict to one challenge

    Returns:
        [{challengeId, text, revealAt, endAt}] sorted by challengeId, then revealAt
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    selected = []
    for cid, groups in hints.items():
        if challenge_id is not None and cid != challenge_id:
            continue
        for group in groups:
            for window in group:
                reveal_at = parse_timestamp(window.reveal_at)
                end_at = parse_timestamp(window.end_at)
                if reveal_at is None or end_at is None:
                    continue
                if reveal_at <= now < end_at:
                    selected.append((window.challenge_id, reveal_at, window))

    selected.sort(key=lambda item: (item[0], item[1]))

    return [
        {
            "challengeId": window.challenge_id,
            "text": window.text,
            "revealAt": window.reveal_at,
            "endAt": window.end_at,
        }
        for _, _, window in selected
    ]
