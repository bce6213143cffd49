"""Helpers shared by the catalog routers."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_payload(model: type[ModelT], payload: Any, entity: str) -> ModelT:
    """Validate a raw JSON body, answering 400 instead of FastAPI's 422."""

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Rejected %s payload: %s", entity, exc.errors())
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {entity} data",
        ) from exc


def storage_failure(action: str, exc: Exception) -> HTTPException:
    """Log a storage error and build the matching 500 response."""

    logger.exception("Storage failure while trying to %s", action, exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


def write_failure(entity: str, exc: Exception) -> HTTPException:
    """Log a failed write and answer 400 like an invalid body."""

    logger.exception("Storage failure while saving %s", entity, exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Invalid {entity} data",
    )
