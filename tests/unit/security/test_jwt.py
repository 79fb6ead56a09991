"""
Unit tests for the session token service.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import jwt

from notevault.core.results import Err, ErrorKind, Ok
from notevault.security.jwt import Identity, TokenService

SECRET = "test-secret-key"


@pytest.fixture
def service():
    return TokenService(secret_key=SECRET, algorithm="HS256", expire_minutes=60)


@pytest.fixture
def identity():
    return Identity(id=uuid4())


def assert_auth_failure(result, reason):
    assert isinstance(result, Err)
    assert result.kind is ErrorKind.AUTH
    assert result.reason == reason


class TestIssueToken:

    def test_payload_has_id_and_exp_only(self, service, identity):
        token = service.issue_token(identity)
        claims = jwt.get_unverified_claims(token)
        assert set(claims) == {"id", "exp"}
        assert claims["id"] == str(identity.id)

    def test_expires_exactly_one_hour_after_issue(self, service, identity):
        issued_at = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        token = service.issue_token(identity, issued_at=issued_at)
        claims = jwt.get_unverified_claims(token)
        assert claims["exp"] - int(issued_at.timestamp()) == 3600

    def test_expires_in(self, service):
        assert service.expires_in == 3600

    def test_from_settings(self, test_settings):
        service = TokenService.from_settings(test_settings)
        assert service.secret_key == test_settings.secret_key
        assert service.expires_in == test_settings.access_token_expire_minutes * 60


class TestVerifyToken:

    def test_round_trip_returns_identity(self, service, identity):
        result = service.verify_token(service.issue_token(identity))
        assert isinstance(result, Ok)
        assert result.value == identity

    def test_bearer_prefix_is_stripped(self, service, identity):
        token = service.issue_token(identity)
        result = service.verify_token(f"Bearer {token}")
        assert isinstance(result, Ok)
        assert result.value == identity

    def test_still_valid_just_before_expiry(self, service, identity):
        issued_at = datetime.now(timezone.utc) - timedelta(minutes=59)
        result = service.verify_token(service.issue_token(identity, issued_at=issued_at))
        assert isinstance(result, Ok)

    def test_expired_after_one_hour(self, service, identity):
        issued_at = datetime.now(timezone.utc) - timedelta(hours=1, minutes=1)
        result = service.verify_token(service.issue_token(identity, issued_at=issued_at))
        assert_auth_failure(result, "expired")

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing(self, service, token):
        assert_auth_failure(service.verify_token(token), "missing")

    def test_garbage_is_invalid(self, service):
        assert_auth_failure(service.verify_token("not-a-jwt"), "invalid")

    @pytest.mark.parametrize("token", ["Bearer ", "Bearer"])
    def test_bare_scheme_is_invalid(self, service, token):
        assert_auth_failure(service.verify_token(token), "invalid")

    def test_other_secret_is_invalid(self, identity):
        foreign = TokenService(secret_key="someone-else").issue_token(identity)
        service = TokenService(secret_key=SECRET)
        assert_auth_failure(service.verify_token(foreign), "invalid")

    def test_tampered_payload_is_invalid(self, service, identity):
        header, _, signature = service.issue_token(identity).split(".")
        other = service.issue_token(Identity(id=uuid4())).split(".")[1]
        assert_auth_failure(service.verify_token(f"{header}.{other}x.{signature}"), "invalid")

    def test_missing_id_claim_is_invalid(self, service):
        exp = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"exp": exp}, SECRET, algorithm="HS256")
        assert_auth_failure(service.verify_token(token), "invalid")

    def test_non_uuid_id_is_invalid(self, service):
        exp = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"id": "42", "exp": exp}, SECRET, algorithm="HS256")
        assert_auth_failure(service.verify_token(token), "invalid")

    def test_token_without_expiry_is_invalid(self, service):
        token = jwt.encode({"id": str(uuid4())}, SECRET, algorithm="HS256")
        assert_auth_failure(service.verify_token(token), "invalid")
