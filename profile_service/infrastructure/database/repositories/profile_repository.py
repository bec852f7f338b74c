from __future__ import annotations

import itertools
import logging
from datetime import datetime

from supabase import Client

from profile_service.domain.entities.profile import ProfileEntity
from profile_service.domain.errors import StorageError
from profile_service.domain.services.date_converter import format_timestamp
from profile_service.infrastructure.config import Settings
from profile_service.infrastructure.database.postgres_client import PostgresClient
from profile_service.infrastructure.database.supabase_client import create_supabase_client

logger = logging.getLogger(__name__)

TABLE = "profiles"


class ProfileRepository:
    """Profile storage backed by PostgreSQL, Supabase or an in-memory dict.

    PostgreSQL wins when a pg client is given; otherwise Supabase is used when
    a client is given; otherwise profiles live in memory for the lifetime of
    the repository. Backend failures surface as StorageError.
    """

    def __init__(self, client: Client | None, pg_client: PostgresClient | None = None) -> None:
        self.client = client
        self.pg_client = pg_client
        self._mem: dict[int, ProfileEntity] = {}
        self._ids = itertools.count(1)

    @property
    def backend(self) -> str:
        if self.pg_client is not None:
            return "postgres"
        if self.client is not None:
            return "supabase"
        return "memory"

    def _row_to_entity(self, row: dict) -> ProfileEntity:
        """Convert database row to ProfileEntity."""
        dob = row["date_of_birth"]
        if isinstance(dob, str):
            dob = datetime.fromisoformat(dob.replace("Z", "+00:00"))
        return ProfileEntity(
            id=int(row["id"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            date_of_birth=format_timestamp(dob),
        )

    def find_all(self) -> list[ProfileEntity]:
        # PostgreSQL mode
        if self.pg_client:
            try:
                rows = self.pg_client.execute_many(f"SELECT * FROM {TABLE} ORDER BY id")
                return [self._row_to_entity(row) for row in rows]
            except Exception as exc:
                raise StorageError("find_all", exc) from exc

        # In-memory mode
        if self.client is None:
            return [self._mem[k] for k in sorted(self._mem)]

        # Supabase mode
        try:  # pragma: no cover - network
            res = self.client.table(TABLE).select("*").order("id").execute()
            return [self._row_to_entity(row) for row in res.data or []]
        except Exception as exc:
            raise StorageError("find_all", exc) from exc

    def find_by_id(self, profile_id: int) -> ProfileEntity | None:
        # PostgreSQL mode
        if self.pg_client:
            try:
                row = self.pg_client.execute_one(f"SELECT * FROM {TABLE} WHERE id = %s", (profile_id,))
                return self._row_to_entity(row) if row else None
            except Exception as exc:
                raise StorageError("find_by_id", exc) from exc

        # In-memory mode
        if self.client is None:
            return self._mem.get(profile_id)

        # Supabase mode
        try:  # pragma: no cover - network
            res = self.client.table(TABLE).select("*").eq("id", profile_id).limit(1).execute()
            rows = res.data or []
            return self._row_to_entity(rows[0]) if rows else None
        except Exception as exc:
            raise StorageError("find_by_id", exc) from exc

    def insert(self, first_name: str, last_name: str, date_of_birth: str) -> ProfileEntity:
        # PostgreSQL mode
        if self.pg_client:
            try:
                query = f"""
                    INSERT INTO {TABLE} (first_name, last_name, date_of_birth)
                    VALUES (%s, %s, %s)
                    RETURNING *
                """
                row = self.pg_client.execute_insert(query, (first_name, last_name, date_of_birth))
                return self._row_to_entity(row)
            except Exception as exc:
                raise StorageError("insert", exc) from exc

        # In-memory mode
        if self.client is None:
            entity = ProfileEntity(
                id=next(self._ids),
                first_name=first_name,
                last_name=last_name,
                date_of_birth=date_of_birth,
            )
            self._mem[entity.id] = entity
            return entity

        # Supabase mode
        try:  # pragma: no cover - network
            data = {"first_name": first_name, "last_name": last_name, "date_of_birth": date_of_birth}
            res = self.client.table(TABLE).insert(data).execute()
            return self._row_to_entity(res.data[0])
        except Exception as exc:
            raise StorageError("insert", exc) from exc

    def update_by_id(
        self, profile_id: int, first_name: str, last_name: str, date_of_birth: str
    ) -> ProfileEntity | None:
        """Replace all fields of a profile. Returns None when the id does not exist."""
        # PostgreSQL mode
        if self.pg_client:
            try:
                query = f"""
                    UPDATE {TABLE}
                    SET first_name = %s, last_name = %s, date_of_birth = %s
                    WHERE id = %s
                    RETURNING *
                """
                row = self.pg_client.execute_one(
                    query, (first_name, last_name, date_of_birth, profile_id)
                )
                return self._row_to_entity(row) if row else None
            except Exception as exc:
                raise StorageError("update_by_id", exc) from exc

        # In-memory mode
        if self.client is None:
            if profile_id not in self._mem:
                return None
            updated = ProfileEntity(
                id=profile_id,
                first_name=first_name,
                last_name=last_name,
                date_of_birth=date_of_birth,
            )
            self._mem[profile_id] = updated
            return updated

        # Supabase mode
        try:  # pragma: no cover - network
            data = {"first_name": first_name, "last_name": last_name, "date_of_birth": date_of_birth}
            res = self.client.table(TABLE).update(data).eq("id", profile_id).execute()
            rows = res.data or []
            return self._row_to_entity(rows[0]) if rows else None
        except Exception as exc:
            raise StorageError("update_by_id", exc) from exc

    def health_check(self) -> bool:
        """Check backend connectivity (for readiness probes)."""
        try:
            if self.pg_client:
                self.pg_client.execute_one("SELECT 1 AS ok")
            elif self.client is not None:  # pragma: no cover - network
                self.client.table(TABLE).select("id").limit(1).execute()
            return True
        except Exception as exc:
            logger.error(f"Storage health check failed: {exc}")
            return False

    def close(self) -> None:
        if self.pg_client:
            self.pg_client.close()


def build_profile_repository(settings: Settings) -> ProfileRepository:
    """Pick the storage backend from settings: PostgreSQL, then Supabase, then memory."""
    if settings.use_local_db:
        return ProfileRepository(None, pg_client=PostgresClient(settings))
    return ProfileRepository(create_supabase_client(settings))
