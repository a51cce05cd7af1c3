"""Demo request intake API — landing page form submissions."""

import structlog
from fastapi import APIRouter, Depends, status

from goloyal.api.dependencies import get_storage
from goloyal.errors import AppError
from goloyal.repositories.base import Storage
from goloyal.schemas.demo_request import (
    DemoRequestCreated,
    DemoRequestIn,
    DemoRequestList,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["demo-requests"])


@router.post(
    "/demo-requests",
    status_code=status.HTTP_201_CREATED,
    response_model=DemoRequestCreated,
)
async def create_demo_request(
    data: DemoRequestIn,
    storage: Storage = Depends(get_storage),
) -> DemoRequestCreated:
    """Store a validated demo request.

    Invalid bodies never reach this function: FastAPI rejects them and the
    validation handler reports every failing field.
    """
    try:
        demo_request = await storage.create_demo_request(data)
    except Exception as e:
        logger.exception("demo_request_failed", error=str(e))
        raise AppError("Failed to submit demo request") from e

    logger.info(
        "demo_request_created",
        id=demo_request.id,
        business_name=demo_request.business_name,
    )

    return DemoRequestCreated(id=demo_request.id)


@router.get("/demo-requests", response_model=DemoRequestList)
async def list_demo_requests(
    storage: Storage = Depends(get_storage),
) -> DemoRequestList:
    """List all demo requests, newest first."""
    try:
        demo_requests = await storage.get_all_demo_requests()
    except Exception as e:
        logger.exception("demo_request_list_failed", error=str(e))
        raise AppError("Failed to retrieve demo requests") from e

    return DemoRequestList(data=demo_requests)
