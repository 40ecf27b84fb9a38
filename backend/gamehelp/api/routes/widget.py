"""Widget endpoints - read the chat widget state and dispatch UI commands."""

import redis.asyncio as aioredis
from fastapi import APIRouter, Depends, HTTPException

from gamehelp.core.controller import ChatController
from gamehelp.core.errors import ChatBusyError, StorageError
from gamehelp.db.redis import get_redis
from gamehelp.schemas.chat import WidgetState
from gamehelp.schemas.commands import CommandRequest
from gamehelp.services.widget_service import widget_service

router = APIRouter()


async def _get_controller(
    client_id: str, redis: aioredis.Redis = Depends(get_redis)
) -> ChatController:
    try:
        return await widget_service.get_controller(redis, client_id)
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/{client_id}", response_model=WidgetState)
async def get_widget(controller: ChatController = Depends(_get_controller)):
    """Current carousel, sidebar and chat log for a client."""
    return controller.view()


@router.post("/{client_id}/commands", response_model=WidgetState)
async def dispatch_command(
    body: CommandRequest, controller: ChatController = Depends(_get_controller)
):
    """Apply one UI command (submit, select_session, new_session, carousel_*)."""
    try:
        await controller.dispatch(body.root)
    except ChatBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return controller.view()


@router.delete("/{client_id}", status_code=204)
async def reset_widget(client_id: str):
    """Drop the in-memory widget; the next request reloads it from storage."""
    widget_service.drop(client_id)
