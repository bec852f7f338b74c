from datetime import UTC, datetime
from unittest.mock import Mock

import pytest

from profile_service.domain.errors import StorageError
from profile_service.infrastructure.config import Settings
from profile_service.infrastructure.database.repositories.profile_repository import (
    ProfileRepository,
    build_profile_repository,
)


class TestInMemoryRepository:
    def test_assigns_sequential_ids(self):
        repo = ProfileRepository(None)
        first = repo.insert("Jane", "Doe", "1990-01-01T00:00:00.000Z")
        second = repo.insert("John", "Doe", "1991-01-01T00:00:00.000Z")
        assert (first.id, second.id) == (1, 2)
        assert repo.find_all() == [first, second]
        assert repo.backend == "memory"

    def test_find_by_id(self):
        repo = ProfileRepository(None)
        created = repo.insert("Jane", "Doe", "1990-01-01T00:00:00.000Z")
        assert repo.find_by_id(created.id) == created
        assert repo.find_by_id(99) is None

    def test_update_replaces_all_fields(self):
        repo = ProfileRepository(None)
        created = repo.insert("Jane", "Doe", "1990-01-01T00:00:00.000Z")
        updated = repo.update_by_id(created.id, "Janet", "Smith", "1980-02-03T00:00:00.000Z")
        assert updated.id == created.id
        assert (updated.first_name, updated.last_name, updated.date_of_birth) == (
            "Janet",
            "Smith",
            "1980-02-03T00:00:00.000Z",
        )
        assert repo.find_by_id(created.id) == updated

    def test_update_unknown_returns_none(self):
        assert ProfileRepository(None).update_by_id(5, "A", "B", "1990-01-01T00:00:00.000Z") is None

    def test_repositories_do_not_share_state(self):
        ProfileRepository(None).insert("Jane", "Doe", "1990-01-01T00:00:00.000Z")
        assert ProfileRepository(None).find_all() == []

    def test_health_check(self):
        assert ProfileRepository(None).health_check() is True


class TestPostgresRepository:
    ROW = {
        "id": 7,
        "first_name": "Jane",
        "last_name": "Doe",
        "date_of_birth": datetime(1990, 1, 1, tzinfo=UTC),
    }

    def test_find_all_normalizes_timestamps(self):
        pg = Mock()
        pg.execute_many.return_value = [self.ROW]
        repo = ProfileRepository(None, pg_client=pg)
        (profile,) = repo.find_all()
        assert profile.id == 7
        assert profile.date_of_birth == "1990-01-01T00:00:00.000Z"
        assert repo.backend == "postgres"

    def test_find_by_id_missing(self):
        pg = Mock()
        pg.execute_one.return_value = None
        assert ProfileRepository(None, pg_client=pg).find_by_id(1) is None
        assert pg.execute_one.call_args[0][1] == (1,)

    def test_insert_passes_fields(self):
        pg = Mock()
        pg.execute_insert.return_value = self.ROW
        profile = ProfileRepository(None, pg_client=pg).insert("Jane", "Doe", "1990-01-01T00:00:00.000Z")
        assert profile.first_name == "Jane"
        assert pg.execute_insert.call_args[0][1] == ("Jane", "Doe", "1990-01-01T00:00:00.000Z")

    def test_update_missing_row_returns_none(self):
        pg = Mock()
        pg.execute_one.return_value = None
        repo = ProfileRepository(None, pg_client=pg)
        assert repo.update_by_id(3, "A", "B", "1990-01-01T00:00:00.000Z") is None
        assert pg.execute_one.call_args[0][1] == ("A", "B", "1990-01-01T00:00:00.000Z", 3)

    @pytest.mark.parametrize("method, args", [
        ("find_all", ()),
        ("find_by_id", (1,)),
        ("insert", ("A", "B", "1990-01-01T00:00:00.000Z")),
        ("update_by_id", (1, "A", "B", "1990-01-01T00:00:00.000Z")),
    ])
    def test_driver_errors_become_storage_errors(self, method, args):
        pg = Mock()
        pg.execute_many.side_effect = RuntimeError("boom")
        pg.execute_one.side_effect = RuntimeError("boom")
        pg.execute_insert.side_effect = RuntimeError("boom")
        with pytest.raises(StorageError) as info:
            getattr(ProfileRepository(None, pg_client=pg), method)(*args)
        assert info.value.operation == method
        assert info.value.to_response() == {"error": "Internal server error"}

    def test_health_check_failure(self):
        pg = Mock()
        pg.execute_one.side_effect = RuntimeError("down")
        assert ProfileRepository(None, pg_client=pg).health_check() is False

    def test_close_closes_pool(self):
        pg = Mock()
        ProfileRepository(None, pg_client=pg).close()
        pg.close.assert_called_once()


def test_supabase_string_timestamps_are_normalized():
    repo = ProfileRepository(None)
    entity = repo._row_to_entity(
        {"id": "3", "first_name": "A", "last_name": "B", "date_of_birth": "1990-01-01T00:00:00+00:00"}
    )
    assert entity.id == 3
    assert entity.date_of_birth == "1990-01-01T00:00:00.000Z"


def test_build_repository_defaults_to_memory_when_supabase_disabled():
    repo = build_profile_repository(Settings(supabase_disabled=True))
    assert repo.backend == "memory"
