import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from src.config.settings import Settings, get_settings
from src.dependencies import TrackerFactory, get_tracker_factory
from src.services import ChangeTracker
from src.services.webhook_security import verify_webhook_signature

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/github", tags=["github"])


async def process_event(
    tracker_factory: TrackerFactory, event: str, payload: Dict[str, Any]
) -> None:
    """Background job: handle one delivery with its own HTTP clients."""
    async with tracker_factory() as tracker:
        await tracker.handle_event(event, payload)


@router.post("/webhooks")
async def receive_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_settings),
    tracker_factory: TrackerFactory = Depends(get_tracker_factory),
):
    """Receive a GitHub App webhook delivery."""
    event = request.headers.get("X-GitHub-Event", "")
    delivery_id = request.headers.get("X-GitHub-Delivery", "unknown")
    body = await request.body()

    if settings.WEBHOOK_SECRET:
        signature = request.headers.get("X-Hub-Signature-256")
        if not verify_webhook_signature(body, signature, settings.WEBHOOK_SECRET):
            raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        payload = json.loads(body)
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid JSON payload")

    if not ChangeTracker.handles(event, payload):
        logger.debug(f"Ignoring delivery {delivery_id}: {event}.{payload.get('action')}")
        return {"status": "ignored", "event": event, "delivery": delivery_id}

    logger.info(f"Queued delivery {delivery_id}: {event}")
    background_tasks.add_task(process_event, tracker_factory, event, payload)
    return JSONResponse(
        status_code=202,
        content={"status": "queued", "event": event, "delivery": delivery_id},
    )
