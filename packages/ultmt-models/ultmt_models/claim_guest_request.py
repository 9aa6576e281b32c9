from enum import Enum

from ultmt_models.base import EmbeddedUser, UltmtModel
from ultmt_models.team import EmbeddedTeam


class Status(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class ClaimGuestRequest(UltmtModel):
    id: str
    guest_id: str
    user_id: str
    team_id: str
    status: Status = Status.PENDING


class DetailedClaimGuestRequest(ClaimGuestRequest):
    guest: EmbeddedUser
    user: EmbeddedUser
    team: EmbeddedTeam
