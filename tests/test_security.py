"""
Tests for password hashing and session tokens.

- hash_password / verify_password: salted bcrypt, verification only through
  bcrypt.checkpw
- SessionAuthority: issue -> verify round trip, 24h expiry, signature checks
"""

from datetime import datetime, timedelta, timezone

import jwt
from jwt.utils import base64url_encode
import pytest

from services.security import (
    SessionAuthority,
    hash_password,
    verify_password,
    BCRYPT_MAX_BYTES,
)
from app.exceptions import ServiceValidationError, UnauthorizedError
from test_fixtures import hours_ago


SECRET = "unit-test-secret-0123456789abcdef0123"


# =============================================================================
# PASSWORD HASHING
# =============================================================================


def test_hash_password_does_not_contain_plaintext():
    hashed = hash_password("s3cret-password", rounds=4)

    assert "s3cret-password" not in hashed
    assert hashed.startswith("$2")


def test_hash_password_is_salted():
    """The same password hashes differently each time."""
    first = hash_password("same-password", rounds=4)
    second = hash_password("same-password", rounds=4)

    assert first != second
    assert verify_password("same-password", first)
    assert verify_password("same-password", second)


def test_verify_password_rejects_wrong_password():
    hashed = hash_password("right-password", rounds=4)

    assert verify_password("right-password", hashed) is True
    assert verify_password("wrong-password", hashed) is False


def test_verify_password_malformed_hash_is_a_mismatch():
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_hash_password_rejects_password_longer_than_bcrypt_limit():
    # 4-byte characters push the byte length past the limit
    too_long = "\U0001F34E" * (BCRYPT_MAX_BYTES // 4 + 1)

    with pytest.raises(ServiceValidationError):
        hash_password(too_long, rounds=4)


def test_verify_password_over_long_password_is_a_mismatch():
    hashed = hash_password("a" * BCRYPT_MAX_BYTES, rounds=4)

    assert verify_password("a" * (BCRYPT_MAX_BYTES + 1), hashed) is False


# =============================================================================
# SESSION AUTHORITY
# =============================================================================


def test_issue_then_verify_returns_same_user_id():
    authority = SessionAuthority(SECRET)

    token = authority.issue(42)

    assert authority.verify(token) == 42


def test_token_carries_24_hour_expiry():
    issued_at = datetime(2025, 11, 1, 9, 0, tzinfo=timezone.utc)
    authority = SessionAuthority(SECRET, clock=lambda: issued_at)

    token = authority.issue(7)
    claims = jwt.decode(token, options={"verify_signature": False})

    assert claims["sub"] == "7"
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60
    assert claims["exp"] == int((issued_at + timedelta(hours=24)).timestamp())


def test_token_fails_after_expiry():
    issuer = SessionAuthority(SECRET, clock=lambda: hours_ago(25))
    token = issuer.issue(7)

    with pytest.raises(UnauthorizedError) as exc_info:
        SessionAuthority(SECRET).verify(token)

    assert exc_info.value.code == "TOKEN_EXPIRED"


def test_token_still_valid_just_before_expiry():
    issuer = SessionAuthority(SECRET, clock=lambda: hours_ago(23.9))

    assert SessionAuthority(SECRET).verify(issuer.issue(7)) == 7


def test_verify_uses_the_same_clock_as_issue():
    issued_at = datetime(2020, 1, 1, 9, 0, tzinfo=timezone.utc)
    authority = SessionAuthority(SECRET, clock=lambda: issued_at)

    assert authority.verify(authority.issue(7)) == 7


def test_token_expires_when_injected_clock_passes_ttl():
    now = [datetime(2025, 11, 1, 9, 0, tzinfo=timezone.utc)]
    authority = SessionAuthority(SECRET, clock=lambda: now[0])
    token = authority.issue(7)

    now[0] += timedelta(hours=23, minutes=59)
    assert authority.verify(token) == 7

    now[0] += timedelta(minutes=1)
    with pytest.raises(UnauthorizedError) as exc_info:
        authority.verify(token)

    assert exc_info.value.code == "TOKEN_EXPIRED"


def test_issue_with_expiry_matches_exp_claim():
    issued_at = datetime(2025, 11, 1, 9, 0, tzinfo=timezone.utc)
    authority = SessionAuthority(SECRET, clock=lambda: issued_at)

    token, expires_at = authority.issue_with_expiry(7)
    claims = jwt.decode(token, options={"verify_signature": False})

    assert expires_at == issued_at + timedelta(hours=24)
    assert claims["exp"] == int(expires_at.timestamp())


def test_token_signed_with_other_secret_is_rejected():
    token = SessionAuthority("another-secret-0123456789abcdef01234").issue(7)

    with pytest.raises(UnauthorizedError) as exc_info:
        SessionAuthority(SECRET).verify(token)

    assert exc_info.value.code == "INVALID_TOKEN"


def test_tampered_token_is_rejected():
    authority = SessionAuthority(SECRET)
    header, payload, signature = authority.issue(7).split(".")
    forged_payload = base64url_encode(b'{"sub":"8","exp":9999999999}')

    forged = ".".join([header, forged_payload.decode("ascii"), signature])

    with pytest.raises(UnauthorizedError):
        authority.verify(forged)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_tokens_are_rejected(token):
    with pytest.raises(UnauthorizedError):
        SessionAuthority(SECRET).verify(token)


def test_token_without_expiry_is_rejected():
    token = jwt.encode({"sub": "7"}, SECRET, algorithm="HS256")

    with pytest.raises(UnauthorizedError):
        SessionAuthority(SECRET).verify(token)


def test_token_with_non_numeric_subject_is_rejected():
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "alice", "exp": exp}, SECRET, algorithm="HS256")

    with pytest.raises(UnauthorizedError):
        SessionAuthority(SECRET).verify(token)


def test_session_authority_requires_secret():
    with pytest.raises(ValueError):
        SessionAuthority("")
