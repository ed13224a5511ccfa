"""
Admin API Routes - Access Key Administration

Out-of-band issuance and deactivation of client access keys.
Authentication is via Admin API Key, not client access keys.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.access_key_validator import AccessKeyValidator
from src.depends import get_access_key_validator

logger = logging.getLogger(__name__)

STORE_ERROR = Error("DATABASE_ERROR", "Database error occurred")

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(verify_admin_api_key)],
)


class AdminModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateApiKeyRequest(AdminModel):
    """Create access key HTTP request payload"""

    client_name: str = Field(..., min_length=1, max_length=255)
    permissions: List[str] = Field(default_factory=list)


class ApiKeyCreatedResponse(AdminModel):
    """The secret is only ever returned here"""

    key_id: str
    api_key: str
    client_name: str
    permissions: List[str]


class ApiKeyStatusResponse(AdminModel):
    key_id: str
    active: bool


@router.post(
    "/api-keys",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiKeyCreatedResponse,
)
async def create_api_key(
    request: CreateApiKeyRequest,
    validator: AccessKeyValidator = Depends(get_access_key_validator),
):
    """
    Create Access Key

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    try:
        issued = await validator.issue_key(request.client_name, request.permissions)
    except Exception:
        logger.exception("API key creation failed")
        raise ServerError(STORE_ERROR)

    return ApiKeyCreatedResponse(
        key_id=str(issued.key_id),
        api_key=issued.api_key,
        client_name=issued.client_name,
        permissions=issued.permissions,
    )


@router.post(
    "/api-keys/{key_id}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=ApiKeyStatusResponse,
)
async def deactivate_api_key(
    key_id: UUID,
    validator: AccessKeyValidator = Depends(get_access_key_validator),
):
    """
    Deactivate Access Key

    The record is kept; only its active flag is cleared.

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: API_KEY_NOT_FOUND
    """
    try:
        deactivated = await validator.deactivate_key(key_id)
    except Exception:
        logger.exception("API key deactivation failed")
        raise ServerError(STORE_ERROR)

    if not deactivated:
        raise ClientError(
            Error("API_KEY_NOT_FOUND", "API key not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return ApiKeyStatusResponse(key_id=str(key_id), active=False)
