"""IPC endpoint — lets the desktop UI invoke channels over local HTTP."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from repair_shop.presentation.ipc import IpcDispatcher, IpcResponse

router = APIRouter(prefix="/ipc", tags=["IPC"])


class IpcRequest(BaseModel):
    """Body of an invocation; ``payload`` is whatever the channel expects."""

    payload: Any = None


def get_ipc_dispatcher(request: Request) -> IpcDispatcher:
    """FastAPI dependency — the dispatcher built by the application factory."""
    return request.app.state.dispatcher


@router.get("", response_model=list[str])
async def list_channels(
    dispatcher: IpcDispatcher = Depends(get_ipc_dispatcher),
) -> list[str]:
    """Names of every callable channel."""
    return dispatcher.channels


@router.post("/{channel}", response_model=IpcResponse)
async def invoke_channel(
    channel: str,
    body: IpcRequest | None = None,
    dispatcher: IpcDispatcher = Depends(get_ipc_dispatcher),
) -> IpcResponse:
    """Invoke a channel. Failures come back as ``ok=false`` with a message."""
    return await dispatcher.invoke(channel, body.payload if body else None)
