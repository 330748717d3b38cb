"""PostgreSQL implementation of Toggle repository."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert

from circle.domain.model import Toggle
from circle.domain.repository import ToggleRepository
from circle.domain.value import FieldRef, ToggleValue, UserId
from circle.persistence.mappers import row_to_toggle, toggle_to_dict
from circle.persistence.repository.base import PostgresRepository
from circle.persistence.tables import toggles_table


class PostgresToggleRepository(PostgresRepository, ToggleRepository):
    """PostgreSQL implementation of ToggleRepository."""

    def _where_ref(self, stmt, field_ref: FieldRef):
        return (
            stmt.where(toggles_table.c.resource == field_ref.resource)
            .where(toggles_table.c.resource_id == field_ref.resource_id)
            .where(toggles_table.c.field == field_ref.field)
        )

    async def find(self, field_ref: FieldRef) -> Optional[Toggle]:
        """Find the current value of a field."""
        stmt = self._where_ref(select(toggles_table), field_ref)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_toggle(row._asdict()) if row else None

    async def find_by_resource(self, resource: str, resource_id: str) -> List[Toggle]:
        """Find every toggle field of one resource, ordered by field name."""
        stmt = (
            select(toggles_table)
            .where(toggles_table.c.resource == resource)
            .where(toggles_table.c.resource_id == resource_id)
            .order_by(toggles_table.c.field)
        )
        result = await self._execute(stmt)
        return [row_to_toggle(row._asdict()) for row in result.fetchall()]

    async def save(self, toggle: Toggle) -> Toggle:
        """Create or replace a toggle row."""
        values = toggle_to_dict(toggle)
        stmt = insert(toggles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="pk_toggles",
            set_={
                "value": stmt.excluded.value,
                "updated_at": stmt.excluded.updated_at,
                "updated_by": stmt.excluded.updated_by,
            },
        )
        await self._execute(stmt)
        await self._flush()
        return toggle

    async def set_value(
        self, field_ref: FieldRef, value: ToggleValue, updated_by: UserId
    ) -> Optional[Toggle]:
        """Set the value of an existing field."""
        stmt = self._where_ref(update(toggles_table), field_ref)
        stmt = stmt.values(
            value=value,
            updated_at=datetime.now(timezone.utc),
            updated_by=updated_by,
        ).returning(toggles_table)
        result = await self._execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self._flush()
        return row_to_toggle(row._asdict())
