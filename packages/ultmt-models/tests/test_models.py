from datetime import datetime, timedelta, timezone

from ultmt_models import (
    ClaimGuestRequest,
    DetailedClaimGuestRequest,
    OneTimePasscode,
    OTPReason,
    Status,
    Team,
)


def _user(user_id: str) -> dict:
    return {"id": user_id, "firstName": "Noah", "lastName": "Lee", "username": f"user{user_id}"}


def test_claim_guest_request_payload_uses_camel_case():
    request = ClaimGuestRequest.model_validate({"id": "r1", "guestId": "g1", "userId": "u1", "teamId": "t1"})
    assert request.status is Status.PENDING
    assert request.to_payload() == {
        "id": "r1",
        "guestId": "g1",
        "userId": "u1",
        "teamId": "t1",
        "status": "pending",
    }


def test_detailed_claim_guest_request_embeds_documents():
    detailed = DetailedClaimGuestRequest.model_validate({
        "id": "r1",
        "guestId": "g1",
        "userId": "u1",
        "teamId": "t1",
        "status": "approved",
        "guest": _user("g1"),
        "user": _user("u1"),
        "team": {
            "id": "t1",
            "place": "Pittsburgh",
            "name": "Temper",
            "teamname": "pghtemper",
            "seasonStart": "2024-01-01T00:00:00Z",
            "seasonEnd": "2024-12-31T00:00:00Z",
        },
    })
    assert detailed.status is Status.APPROVED
    assert detailed.guest.username == "userg1"
    assert detailed.team.season_end.year == 2024


def test_team_accepts_field_names():
    team = Team(
        id="t1",
        place="Pittsburgh",
        name="Temper",
        teamname="pghtemper",
        season_start=datetime(2024, 1, 1, tzinfo=timezone.utc),
        season_end=datetime(2024, 12, 31, tzinfo=timezone.utc),
        managers=[_user("m1")],
    )
    assert team.roster_open is False
    assert team.managers[0].first_name == "Noah"
    assert team.to_payload()["seasonNumber"] == 1


def test_one_time_passcode_defaults():
    otp = OneTimePasscode(id="o1", creator="u1", reason=OTPReason.TEAM_JOIN)
    assert len(otp.passcode) == 6
    assert otp.passcode.isdigit()
    assert otp.expires_at - otp.created_at == timedelta(hours=1)
    assert not otp.is_expired()


def test_one_time_passcode_expiry():
    created = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    otp = OneTimePasscode(id="o1", creator="u1", reason="gamejoin", created_at=created, passcode="123456")
    assert otp.passcode == "123456"
    assert not otp.is_expired(created + timedelta(minutes=59))
    assert not otp.is_expired(created + timedelta(hours=1))
    assert otp.is_expired(created + timedelta(hours=1, seconds=1))


def test_one_time_passcode_naive_created_at_is_utc():
    otp = OneTimePasscode(id="o1", creator="u1", reason="teamjoin", created_at=datetime(2024, 5, 1, 12, 0))
    assert otp.created_at.tzinfo is timezone.utc
    assert otp.expires_at == datetime(2024, 5, 1, 13, 0, tzinfo=timezone.utc)
    assert otp.is_expired()
    assert not otp.is_expired(datetime(2024, 5, 1, 12, 30))


def test_one_time_passcode_naive_iso_string():
    otp = OneTimePasscode.model_validate(
        {"id": "o1", "creator": "u1", "reason": "teamjoin", "createdAt": "2024-05-01T12:00:00"}
    )
    assert otp.is_expired()
    assert otp.is_expired(datetime(2024, 5, 1, 13, 0, 1))
