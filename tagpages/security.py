from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from tagpages.settings import Settings, settings

API_KEY_NAME = "X-TAGPAGES-Key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


def get_settings() -> Settings:
    return settings


def get_api_key(
    api_key_header: str = Security(api_key_header),
    current_settings: Settings = Depends(get_settings),
):
    """Guard for the tag routes: the header must equal TAGPAGES_API_KEY."""
    if api_key_header == current_settings.TAGPAGES_API_KEY:
        return api_key_header
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail=f"Missing or invalid {API_KEY_NAME} header",
    )
