"""Example resource endpoints."""

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from app.models.example import ExampleRequest
from app.services.validation import deserialize, validate_all
from app.utils.errors import RequestValidationFailed

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/example", tags=["example"])


@router.get("")
async def get_example(id: int = 0):
    """Return the canned example record for id 1, 404 for anything else."""
    if id == 1:
        record = ExampleRequest(name="Example1")
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=record.model_dump(by_alias=True),
        )

    logger.debug("Example %s not found", id)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.post("")
async def add_example(request: Request):
    """Bind and validate an example record. Nothing is stored."""
    body = await request.body()

    record = deserialize(body)
    errors = validate_all(record)
    if errors:
        raise RequestValidationFailed(errors)

    logger.info("Accepted example %r", record.name)
    return Response(status_code=status.HTTP_200_OK)
