from .base import EmbeddedUser, UltmtModel
from .claim_guest_request import ClaimGuestRequest, DetailedClaimGuestRequest, Status
from .one_time_passcode import OneTimePasscode, OTPReason, generate_passcode
from .team import EmbeddedTeam, Team

__all__ = [
    "ClaimGuestRequest",
    "DetailedClaimGuestRequest",
    "EmbeddedTeam",
    "EmbeddedUser",
    "OneTimePasscode",
    "OTPReason",
    "Status",
    "Team",
    "UltmtModel",
    "generate_passcode",
]
