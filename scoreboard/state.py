"""
Application state shared by all request handlers

One Scoreboard is built at startup and attached to the FastAPI app; the
session flags share the repository lock so every write is serialized.
"""
from dataclasses import dataclass, field

from scoreboard.config import Settings
from scoreboard.session import GameSession
from scoreboard.store import Repository


@dataclass
class Scoreboard:
    store: Repository
    session: GameSession = field(init=False)

    def __post_init__(self):
        self.session = GameSession(self.store.lock)


def build_scoreboard(settings: Settings) -> Scoreboard:
    """
    Load the seed data and wrap it in a Scoreboard

    Raises:
        FileNotFoundError, SeedDataError: If the seed data cannot be loaded
    """
    store = Repository(settings.teams_path, settings.challenges_path, settings.hints_path)
    store.reset()
    return Scoreboard(store=store)
