from pydantic import BaseModel, Field
from typing import Any, List


class APIResponse(BaseModel):
    """Envelope returned by every endpoint"""
    status_code: int = 200
    is_success: bool = True
    error_messages: List[str] = Field(default_factory=list)
    result: Any = None


def success(result: Any = None, status_code: int = 200) -> APIResponse:
    return APIResponse(status_code=status_code, is_success=True, result=result)


def failure(*messages: str, status_code: int = 400) -> APIResponse:
    return APIResponse(status_code=status_code, is_success=False, error_messages=list(messages))
