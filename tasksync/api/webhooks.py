"""GitHub webhook endpoint"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from tasksync.api.tasks import TaskResponse
from tasksync.errors import MalformedPayloadError, TaskPersistenceError, UnknownSenderError
from tasksync.models.base import get_db
from tasksync.services.webhook_handler import WebhookHandler

router = APIRouter(prefix="/api/webhooks", tags=["webhooks"])


@router.post("/github")
def receive_github_webhook(
    payload: Dict[str, Any] = Body(...),
    x_github_event: Optional[str] = Header(None),
    x_github_delivery: Optional[str] = Header(None),
    db: Session = Depends(get_db),
):
    """Receive a GitHub delivery and sync issue events into tasks"""
    handler = WebhookHandler(db)
    try:
        result = handler.handle(x_github_event, payload, delivery_id=x_github_delivery)
    except (MalformedPayloadError, UnknownSenderError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except TaskPersistenceError as e:
        # A 5xx makes GitHub redeliver; the upsert keeps that safe.
        raise HTTPException(status_code=500, detail=str(e))

    if result["status"] == "ignored":
        return JSONResponse(status_code=202, content=result)

    return {
        "status": result["status"],
        "tasks": [TaskResponse.model_validate(t).model_dump(mode="json") for t in result["tasks"]],
    }
