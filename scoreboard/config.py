"""
Configuration loader
"""
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel

DEFAULT_CONFIG_PATH = "config/scoreboard.yaml"


class Settings(BaseModel):
    """Server settings (YAML file, then environment overrides)"""
    data_dir: str = "data"
    teams_file: str = "teams.json"
    challenges_file: str = "challenges.json"
    hints_file: str = "hints.json"
    static_dir: str = "dist"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @property
    def teams_path(self) -> Path:
        return Path(self.data_dir) / self.teams_file

    @property
    def challenges_path(self) -> Path:
        return Path(self.data_dir) / self.challenges_file

    @property
    def hints_path(self) -> Path:
        return Path(self.data_dir) / self.hints_file


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from YAML file

    The file is taken from config_path, else the SCOREBOARD_CONFIG environment
    variable, else config/scoreboard.yaml. PORT, SCOREBOARD_DATA_DIR and
    SCOREBOARD_STATIC_DIR override the file.

    Args:
        config_path: Path to config file

    Returns:
        Settings object

    Raises:
        FileNotFoundError: If an explicitly requested config file is missing
    """
    explicit = config_path or os.environ.get("SCOREBOARD_CONFIG")
    path = Path(explicit or DEFAULT_CONFIG_PATH)

    data = {}
    if path.exists():
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {path}")

    if os.environ.get("PORT"):
        data['port'] = os.environ["PORT"]
    if os.environ.get("SCOREBOARD_DATA_DIR"):
        data['data_dir'] = os.environ["SCOREBOARD_DATA_DIR"]
    if os.environ.get("SCOREBOARD_STATIC_DIR"):
        data['static_dir'] = os.environ["SCOREBOARD_STATIC_DIR"]

    return Settings(**data)
