"""Referential integrity checks run before a parent record is deleted."""

from repair_shop.application.interfaces import StorageSession
from repair_shop.domain.entities import SCHEMAS
from repair_shop.domain.entity_schema import EntityKind


class ReferentialIntegrityChecker:
    """Counts the child rows that keep a parent record historically referenced.

    Read-only: it only ever calls ``count`` on the child stores. Children
    count whether or not they are themselves active.
    """

    def __init__(self, session: StorageSession):
        self._session = session

    async def count_dependents(self, kind: EntityKind, parent_id: int) -> int:
        total = 0
        for rule in SCHEMAS[kind].dependents:
            child_store = self._session.store(SCHEMAS[rule.child_kind])
            total += await child_store.count(filters={rule.foreign_key: parent_id})
        return total
