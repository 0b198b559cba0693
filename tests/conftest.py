import json

import pytest
from fastapi.testclient import TestClient

from scoreboard.config import Settings
from scoreboard.main import create_app
from scoreboard.store import Repository


TEAMS = [
    {
        "id": "t1",
        "name": "Red",
        "color": "#ff0000",
        "points": 0,
        "completedChallenges": [],
        "players": [
            {"id": "p1", "name": "Alice", "personalPoints": 0},
            {"id": "p2", "name": "Bob", "personalPoints": 0},
        ],
    },
    {
        "id": "t2",
        "name": "Blue",
        "points": 7,
        "completedChallenges": [],
        "players": [
            {"id": "p3", "name": "Carol", "personalPoints": 7},
            {"id": "p4", "name": "Dan", "personalPoints": 0},
        ],
    },
    {
        "id": "t3",
        "name": "Green",
        "points": 0,
        "completedChallenges": [],
        "players": [
            {"id": "p5", "name": "Eve", "personalPoints": 0},
        ],
    },
]

CHALLENGES = [
    {"id": "c1", "name": "Group photo", "points": 10, "type": "normal", "disabled": False, "winners": []},
    {"id": "c2", "name": "Hidden chest", "points": 20, "type": "secret", "disabled": False, "winners": []},
    {"id": "c3", "name": "Lighthouse", "points": 30, "type": "rare", "disabled": False, "winners": []},
    {"id": "c4", "name": "Song", "points": 5, "winners": []},
]

HINTS = {
    "c3": [
        [
            {"text": "Look at the sea", "revealAt": "2024-01-01T10:00:00Z", "endAt": "2024-01-01T10:05:00Z"},
        ]
    ],
    "c2": [
        [
            {"text": "Not outside", "revealAt": "2024-01-01T09:30:00Z", "endAt": "2024-01-01T11:00:00Z"},
            {"text": "Broken window", "revealAt": "soon", "endAt": "2024-01-01T11:00:00Z"},
        ],
        [
            {"text": "Under the stairs", "revealAt": "2024-01-01T09:00:00Z", "endAt": "2024-01-01T11:00:00Z"},
        ],
    ],
    "c1": [
        [
            {"text": "Everyone in frame", "revealAt": "2024-01-01T08:00:00Z", "endAt": "2024-01-01T12:00:00Z"},
        ]
    ],
}


def write_seed(directory, teams=None, challenges=None, hints=None):
    """Write the three seed files into directory"""
    files = {
        "teams.json": TEAMS if teams is None else teams,
        "challenges.json": CHALLENGES if challenges is None else challenges,
        "hints.json": HINTS if hints is None else hints,
    }
    for name, content in files.items():
        (directory / name).write_text(json.dumps(content), encoding="utf-8")


@pytest.fixture()
def seed_dir(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    write_seed(data_dir)
    return data_dir


@pytest.fixture()
def store(seed_dir):
    repo = Repository(seed_dir / "teams.json", seed_dir / "challenges.json", seed_dir / "hints.json")
    repo.reset()
    return repo


@pytest.fixture()
def static_dir(tmp_path):
    build = tmp_path / "dist"
    (build / "assets").mkdir(parents=True)
    (build / "index.html").write_text("<html><body>scoreboard</body></html>", encoding="utf-8")
    (build / "assets" / "app.js").write_text("console.log('hi');", encoding="utf-8")
    return build


@pytest.fixture()
def settings(seed_dir, static_dir):
    return Settings(data_dir=str(seed_dir), static_dir=str(static_dir))


@pytest.fixture()
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
