"""
Access key gate

First gate of the request pipeline. Rejects the request with 401 before
any body processing when the access key is missing or not valid.
"""

import logging

from fastapi import Depends, Request, status

from src.libs.result import Error
from src.api.error import ClientError
from src.app.services.access_key_validator import AccessKeyValidator
from src.depends import get_access_key_validator, get_config

logger = logging.getLogger(__name__)

INVALID_API_KEY = Error("INVALID_API_KEY", "Invalid or missing API key")


def extract_api_key(request: Request, header_name: str, query_param: str):
    """Header first, query parameter as fallback"""
    return request.headers.get(header_name) or request.query_params.get(query_param)


async def require_api_key(
    request: Request,
    validator: AccessKeyValidator = Depends(get_access_key_validator),
    config=Depends(get_config),
) -> str:
    api_key = extract_api_key(request, config.API_KEY_HEADER, config.API_KEY_QUERY_PARAM)

    if not api_key or not await validator.validate(api_key):
        logger.warning(f"{INVALID_API_KEY.message}: {request.method} {request.url.path}")
        raise ClientError(INVALID_API_KEY, status_code=status.HTTP_401_UNAUTHORIZED)

    # Attribution for downstream logging/auditing
    request.state.api_key = api_key
    request.state.client_name = await validator.client_name_for(api_key)
    return api_key
