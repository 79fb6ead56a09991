"""Unit tests for the ownership checks."""

import uuid
from unittest.mock import AsyncMock, Mock

import pytest

from notevault.core.results import Err, ErrorKind, Ok
from notevault.core.services.access_control import AccessControl, NoteAction, parse_id
from notevault.security.jwt import Identity


def make_note(owner_id, shared_with=None):
    note = Mock()
    note.id = uuid.uuid4()
    note.owner_id = owner_id
    note.shared_with = shared_with or []
    note.is_owned_by = lambda user_id: user_id == owner_id
    return note


class TestParseId:

    def test_valid_uuid_string(self):
        raw = uuid.uuid4()
        assert parse_id(str(raw)) == raw

    def test_uuid_passthrough(self):
        raw = uuid.uuid4()
        assert parse_id(raw) is raw

    @pytest.mark.parametrize("raw", [None, "", "42", "not-an-id"])
    def test_malformed_is_absent(self, raw):
        assert parse_id(raw) is None


class TestAccessControl:

    @pytest.fixture
    def note_repo(self):
        return AsyncMock()

    @pytest.fixture
    def access(self, note_repo):
        return AccessControl(note_repo)

    @pytest.fixture
    def owner(self):
        return Identity(id=uuid.uuid4())

    @pytest.mark.parametrize("action", list(NoteAction))
    def test_owner_allowed_for_every_action(self, access, owner, action):
        note = make_note(owner.id)
        result = access.check(owner, note, action)
        assert isinstance(result, Ok)
        assert result.value is note

    @pytest.mark.parametrize("action", list(NoteAction))
    def test_non_owner_forbidden(self, access, owner, action):
        note = make_note(uuid.uuid4())
        result = access.check(owner, note, action)
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.FORBIDDEN
        assert result.message == "Not authorized"

    @pytest.mark.parametrize("action", list(NoteAction))
    def test_sharing_grants_nothing(self, access, owner, action):
        note = make_note(uuid.uuid4(), shared_with=[owner.id])
        result = access.check(owner, note, action)
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.FORBIDDEN

    def test_missing_note_is_forbidden(self, access, owner):
        result = access.check(owner, None, NoteAction.READ)
        assert result.kind is ErrorKind.FORBIDDEN

    @pytest.mark.asyncio
    async def test_load_for_fetches_and_checks(self, access, note_repo, owner):
        note = make_note(owner.id)
        note_repo.get_by_id.return_value = note

        result = await access.load_for(owner, str(note.id), NoteAction.UPDATE)

        assert isinstance(result, Ok)
        note_repo.get_by_id.assert_awaited_once_with(note.id)

    @pytest.mark.asyncio
    async def test_load_for_malformed_id_skips_lookup(self, access, note_repo, owner):
        result = await access.load_for(owner, "garbage", NoteAction.DELETE)

        assert result.kind is ErrorKind.FORBIDDEN
        note_repo.get_by_id.assert_not_awaited()
