import secrets
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator, model_validator

from ultmt_models.base import UltmtModel

PASSCODE_LENGTH = 6
PASSCODE_TTL = timedelta(hours=1)


class OTPReason(str, Enum):
    PASSWORD_RECOVERY = "passwordrecovery"
    TEAM_JOIN = "teamjoin"
    GAME_JOIN = "gamejoin"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def generate_passcode(length: int = PASSCODE_LENGTH) -> str:
    return "".join(secrets.choice("0123456789") for _ in range(length))


class OneTimePasscode(UltmtModel):
    id: str
    passcode: str = Field(default_factory=generate_passcode)
    created_at: datetime = Field(default_factory=_utc_now)
    expires_at: Optional[datetime] = None
    creator: str
    reason: OTPReason
    team: Optional[str] = None

    @field_validator("created_at", "expires_at")
    @classmethod
    def _ensure_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value) if value is not None else None

    @model_validator(mode="after")
    def _default_expiry(self) -> "OneTimePasscode":
        # Passcodes live for an hour from creation unless told otherwise.
        if self.expires_at is None:
            self.expires_at = self.created_at + PASSCODE_TTL
        return self

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = _as_utc(now) if now is not None else _utc_now()
        return now > self.expires_at
