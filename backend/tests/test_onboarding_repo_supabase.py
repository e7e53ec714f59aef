"""
Supabase adapters: conflicts are read from the structured PostgREST error
code, never from message text.
"""

import pytest
from postgrest.exceptions import APIError

from onboarding.ports import DuplicateAssignmentError, ProfileStoreError, RoleStoreError
from onboarding.repo_supabase import SupabaseProfileRepo, SupabaseRoleAssignmentRepo


class _Query:
    def __init__(self, client, table):
        self._client = client
        self._table = table

    def insert(self, row):
        self._client.calls.append(("insert", self._table, dict(row), None))
        return self

    def upsert(self, row, on_conflict=None):
        self._client.calls.append(("upsert", self._table, dict(row), on_conflict))
        return self

    def execute(self):
        if self._client.error is not None:
            raise self._client.error
        return {"data": []}


class FakeSupabaseClient:
    def __init__(self, error: Exception | None = None):
        self.calls: list = []
        self.error = error

    def table(self, name):
        return _Query(self, name)


def test_insert_role_writes_one_row():
    client = FakeSupabaseClient()
    SupabaseRoleAssignmentRepo(client).insert_role(user_id="u-1", role="student")
    assert client.calls == [("insert", "user_roles", {"user_id": "u-1", "role": "student"}, None)]


def test_unique_violation_code_maps_to_duplicate():
    err = APIError({"code": "23505", "message": "duplicate key value violates unique constraint", "details": None, "hint": None})
    repo = SupabaseRoleAssignmentRepo(FakeSupabaseClient(error=err))
    with pytest.raises(DuplicateAssignmentError):
        repo.insert_role(user_id="u-1", role="tutor")


def test_duplicate_wording_without_code_is_not_a_duplicate():
    err = APIError({"code": "42501", "message": "duplicate key? no: permission denied", "details": None, "hint": None})
    repo = SupabaseRoleAssignmentRepo(FakeSupabaseClient(error=err))
    with pytest.raises(RoleStoreError) as excinfo:
        repo.insert_role(user_id="u-1", role="tutor")
    assert not isinstance(excinfo.value, DuplicateAssignmentError)
    assert "permission denied" in str(excinfo.value)


def test_transport_error_becomes_role_store_error():
    repo = SupabaseRoleAssignmentRepo(FakeSupabaseClient(error=TimeoutError("timed out")))
    with pytest.raises(RoleStoreError) as excinfo:
        repo.insert_role(user_id="u-1", role="student")
    assert str(excinfo.value) == "timed out"


@pytest.mark.parametrize("role, table", [("student", "student_profiles"), ("tutor", "tutor_profiles")])
def test_save_profile_upserts_by_user_id(role, table):
    client = FakeSupabaseClient()
    SupabaseProfileRepo(client).save_profile(user_id="u-1", role=role, profile={"name": "Ana", "subjects": ["Art"]})
    assert client.calls == [("upsert", table, {"name": "Ana", "subjects": ["Art"], "user_id": "u-1"}, "user_id")]


def test_save_profile_failure_becomes_profile_store_error():
    err = APIError({"code": "PGRST204", "message": "Could not find the 'bio' column", "details": None, "hint": None})
    repo = SupabaseProfileRepo(FakeSupabaseClient(error=err))
    with pytest.raises(ProfileStoreError) as excinfo:
        repo.save_profile(user_id="u-1", role="tutor", profile={"name": "Ana"})
    assert "bio" in str(excinfo.value)


def test_save_profile_rejects_unknown_role():
    with pytest.raises(ValueError):
        SupabaseProfileRepo(FakeSupabaseClient()).save_profile(user_id="u-1", role="admin", profile={})
