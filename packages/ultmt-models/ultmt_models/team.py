from datetime import datetime
from typing import List, Optional

from ultmt_models.base import EmbeddedUser, UltmtModel


class EmbeddedTeam(UltmtModel):
    id: str
    place: str
    name: str
    teamname: str
    season_start: datetime
    season_end: datetime


class Team(UltmtModel):
    id: str
    place: str
    name: str
    teamname: str
    managers: List[EmbeddedUser] = []
    players: List[EmbeddedUser] = []
    season_start: datetime
    season_end: datetime
    season_number: int = 1
    continuation_id: Optional[str] = None
    roster_open: bool = False
    requests: List[str] = []
    games: List[str] = []
