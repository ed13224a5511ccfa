"""
Admin API Key Authentication

Guards administrative endpoints such as access key issuance.
"""

import secrets

from fastapi import Depends, Header, status
from src.libs.result import Error
from src.api.error import ClientError
from src.depends import get_config


async def verify_admin_api_key(
    x_admin_api_key: str = Header(None), config=Depends(get_config)
):
    """
    Verify admin API key from X-Admin-API-Key header.

    Different from client access keys - this is operator-to-service auth.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_admin_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not secrets.compare_digest(x_admin_api_key, config.ADMIN_API_KEY):
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
