"""
Data models for the scoreboard server
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _unique(values: List[str]) -> List[str]:
    """Collapse duplicates, keeping first occurrence order"""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class WireModel(BaseModel):
    """
    Base for everything exchanged with the frontend.

    Attributes are snake_case in Python and camelCase on the wire. Fields the
    server does not know about (names, descriptions, colors...) are kept and
    echoed back untouched.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        use_enum_values=True,
        validate_default=True,
    )

    def to_wire(self) -> Dict:
        return self.model_dump(by_alias=True)


class ChallengeType(str, Enum):
    NORMAL = "normal"
    RARE = "rare"
    SECRET = "secret"


EXCLUSIVE_TYPES = {ChallengeType.RARE.value, ChallengeType.SECRET.value}


class Player(WireModel):
    """A player, owned by exactly one team roster at a time"""
    id: str
    name: str = ""
    personal_points: int = 0


class Team(WireModel):
    """A team with its roster, total points and completed challenges"""
    id: str
    name: str = ""
    players: List[Player] = []
    points: int = 0
    completed_challenges: List[str] = []

    @field_validator("completed_challenges")
    @classmethod
    def dedupe_completed(cls, value: List[str]) -> List[str]:
        return _unique(value)


class Challenge(WireModel):
    """A challenge and the teams that won it"""
    id: str
    points: int = 0
    type: ChallengeType = ChallengeType.NORMAL
    disabled: bool = False
    winners: List[str] = []

    @field_validator("winners")
    @classmethod
    def dedupe_winners(cls, value: List[str]) -> List[str]:
        return _unique(value)

    @property
    def is_exclusive(self) -> bool:
        """rare/secret challenges accept a single winner"""
        return self.type in EXCLUSIVE_TYPES


class HintWindow(WireModel):
    """
    A hint visible between reveal_at (inclusive) and end_at (exclusive).

    Bounds are kept as the raw seed values (any JSON type); they are parsed
    at query time so that a malformed or non-string bound only hides its own
    window.
    """
    challenge_id: str
    text: str = ""
    reveal_at: Optional[Any] = None
    end_at: Optional[Any] = None


# challenge id -> ordered hint groups -> ordered windows
HintSchedule = Dict[str, List[List[HintWindow]]]


class SessionState(WireModel):
    """Global display flags: suspense mode and game pause"""
    suspense_mode: bool = False
    pause_until: Optional[str] = None


class SeedSnapshot(BaseModel):
    """Freshly loaded seed data, not shared with the live store"""
    teams: List[Team] = Field(default_factory=list)
    challenges: List[Challenge] = Field(default_factory=list)
    hints: HintSchedule = Field(default_factory=dict)


class Outcome(str, Enum):
    APPLIED = "applied"
    IGNORED = "ignored"
    REJECTED = "rejected"


class OperationResult(BaseModel):
    """
    Result of a state operation.

    Only REJECTED is an error for the caller; IGNORED (unknown ids, disabled
    or already-won challenges) still reports success.
    """
    outcome: Outcome
    reason: Optional[str] = None

    @classmethod
    def applied(cls) -> "OperationResult":
        return cls(outcome=Outcome.APPLIED)

    @classmethod
    def ignored(cls, reason: str) -> "OperationResult":
        return cls(outcome=Outcome.IGNORED, reason=reason)

    @classmethod
    def rejected(cls, error: str) -> "OperationResult":
        return cls(outcome=Outcome.REJECTED, reason=error)

    @property
    def success(self) -> bool:
        return self.outcome != Outcome.REJECTED
