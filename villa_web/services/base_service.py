"""
HTTP plumbing shared by the API client services.

``BaseService.send`` never raises for transport or HTTP failures: every
outcome comes back as an ``APIResponse`` so callers only inspect
``is_success``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ValidationError

from ..logging_config import get_logger
from ..models import APIResponse

logger = get_logger(__name__)


class APIType(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass
class APIRequest:
    url: str
    api_type: APIType = APIType.GET
    data: Any = None
    token: Optional[str] = None


class BaseService:
    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def send(self, api_request: APIRequest) -> APIResponse:
        headers = {"Accept": "application/json"}
        if api_request.token:
            headers["Authorization"] = f"Bearer {api_request.token}"

        payload = api_request.data
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")

        try:
            response = self.client.request(
                api_request.api_type.value,
                api_request.url,
                json=payload,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.error(f"{api_request.api_type.value} {api_request.url} failed: {exc}")
            return APIResponse(status_code=503, is_success=False, error_messages=[str(exc)])

        try:
            api_response = APIResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            logger.warning(f"{api_request.api_type.value} {api_request.url} returned a non-envelope body")
            return APIResponse(
                status_code=response.status_code,
                is_success=False,
                error_messages=[f"Unexpected response from API ({response.status_code})"],
            )

        if response.is_error:
            api_response.is_success = False
        return api_response
