"""Lifecycle orchestration — hard delete, soft delete and reactivation.

Per record the reachable states are Active, Inactive and Purged:

    Active --delete, 0 dependents--> Purged
    Active --delete, N dependents--> Inactive
    Inactive --reactivate--> Active

Each transition is a single store write, so there is nothing to retry and
no partial state. Store errors propagate unchanged.
"""

import logging

from repair_shop.application.interfaces import StorageSession
from repair_shop.application.services.integrity_checker import ReferentialIntegrityChecker
from repair_shop.domain.entities import SCHEMAS, ActionResult, DeleteMode, DeleteOutcome
from repair_shop.domain.entity_schema import DeletePolicy, EntityKind

logger = logging.getLogger(__name__)


class LifecycleManager:
    """Decides and applies delete/reactivate transitions for any entity kind."""

    def __init__(
        self,
        session: StorageSession,
        integrity_checker: ReferentialIntegrityChecker | None = None,
    ):
        self._session = session
        self._integrity = integrity_checker or ReferentialIntegrityChecker(session)

    async def delete(self, kind: EntityKind, record_id: int) -> DeleteOutcome:
        """Delete a record the way its kind's delete policy prescribes.

        For kinds that track dependents the mode is a pure function of the
        dependent count: zero purges the row, anything else deactivates it.
        """
        schema = SCHEMAS[kind]
        store = self._session.store(schema)

        if schema.delete_policy is DeletePolicy.ALWAYS_SOFT:
            await store.set_active(record_id, False)
            logger.info("%s %s deactivated", schema.label, record_id)
            return DeleteOutcome(mode=DeleteMode.SOFT, message=f"{schema.label} deactivated.")

        dependents = 0
        if schema.delete_policy is DeletePolicy.CHECK_DEPENDENTS:
            dependents = await self._integrity.count_dependents(kind, record_id)

        if dependents == 0:
            await store.hard_delete(record_id)
            logger.info("%s %s deleted permanently", schema.label, record_id)
            return DeleteOutcome(
                mode=DeleteMode.HARD,
                message=f"{schema.label} deleted permanently.",
            )

        await store.set_active(record_id, False)
        logger.info(
            "%s %s has %d dependent record(s); marked inactive",
            schema.label,
            record_id,
            dependents,
        )
        return DeleteOutcome(
            mode=DeleteMode.SOFT,
            message=(
                f"{schema.label} has {dependents} associated record(s) and was "
                f"marked inactive; history preserved."
            ),
            dependents=dependents,
        )

    async def deactivate(self, kind: EntityKind, record_id: int) -> ActionResult:
        """Unconditionally mark a record inactive, whatever its dependents."""
        schema = SCHEMAS[kind]
        await self._session.store(schema).set_active(record_id, False)
        logger.info("%s %s deactivated", schema.label, record_id)
        return ActionResult(success=True, message=f"{schema.label} deactivated.")

    async def reactivate(self, kind: EntityKind, record_id: int) -> ActionResult:
        """Make a record active again. Idempotent.

        Already-active records are left as they are; a purged record has
        nothing left to reactivate, which is reported as a no-op success.
        """
        schema = SCHEMAS[kind]
        store = self._session.store(schema)
        record = await store.get(record_id)

        if record is None:
            logger.info("%s %s is purged; reactivation is a no-op", schema.label, record_id)
            return ActionResult(
                success=True,
                message=f"{schema.label} no longer exists; nothing to reactivate.",
            )

        if not record["is_active"]:
            await store.set_active(record_id, True)
            logger.info("%s %s reactivated", schema.label, record_id)
        return ActionResult(success=True, message=f"{schema.label} reactivated.")
