"""Channel-name dispatch between the UI and the entity repositories.

This is the only layer allowed to turn exceptions into strings: every
failure is logged with its specific kind and the caller gets a localized
message instead of the exception object.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from repair_shop.application.interfaces import StorageBackend
from repair_shop.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    EntityValidationError,
    StorageError,
)
from repair_shop.infrastructure.dependencies import Repositories, build_repositories
from repair_shop.presentation.ipc.messages import MessageCatalog

logger = logging.getLogger(__name__)

Handler = Callable[[Repositories, Any], Awaitable[Any]]


class IpcResponse(BaseModel):
    """Envelope returned for every invocation."""

    ok: bool
    data: Any = None
    error: str | None = None
    error_code: str | None = None


class IpcDispatcher:
    """Maps channel names ("list-clients", ...) to handlers.

    Each invocation runs in its own storage unit of work, so a handler's
    writes are committed together or not at all.
    """

    def __init__(self, backend: StorageBackend, locale: str = "en"):
        self._backend = backend
        self._messages = MessageCatalog(locale)
        self._handlers: dict[str, Handler] = {}

    @property
    def channels(self) -> list[str]:
        return sorted(self._handlers)

    def register(self, channel: str, handler: Handler) -> None:
        if channel in self._handlers:
            raise ValueError(f"Channel '{channel}' is already registered")
        self._handlers[channel] = handler

    def _failure(self, code: str, message: str) -> IpcResponse:
        return IpcResponse(ok=False, error=message, error_code=code)

    async def invoke(self, channel: str, payload: Any = None) -> IpcResponse:
        handler = self._handlers.get(channel)
        if handler is None:
            logger.warning("Unknown channel '%s'", channel)
            return self._failure("unknown_channel", self._messages.get("unknown_channel"))

        try:
            async with self._backend.session() as session:
                data = await handler(build_repositories(session), payload)
        except DuplicateEntityError as exc:
            logger.info("[%s] duplicate key: %s", channel, exc)
            return self._failure("duplicate", self._messages.duplicate(exc.field))
        except (EntityValidationError, ValidationError) as exc:
            logger.info("[%s] validation failed: %s", channel, exc)
            return self._failure("validation", self._messages.get("validation"))
        except EntityNotFoundError as exc:
            logger.info("[%s] not found: %s", channel, exc)
            return self._failure("not_found", self._messages.get("not_found"))
        except StorageError:
            logger.exception("[%s] storage failure", channel)
            return self._failure("storage", self._messages.get("generic_failure"))
        except Exception:
            logger.exception("[%s] unexpected failure", channel)
            return self._failure("internal", self._messages.get("generic_failure"))

        logger.debug("[%s] ok", channel)
        return IpcResponse(ok=True, data=data)
