"""
Error schemas - Body of every non-2xx response

Clients can branch on error.code without parsing messages.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    code: str = Field(description="Machine-readable error code, e.g. INVALID_CONFIG_VALUE")
    message: str = Field(description="Human-readable summary")
    details: Optional[Dict[str, Any]] = Field(None, description="Offending field, value or valid names")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ErrorResponse(BaseModel):
    """Standard error envelope"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "error": {
                "code": "UNKNOWN_CONFIG_FIELD",
                "message": "Unknown configuration field(s): colour",
                "details": {"fields": ["colour"]},
                "timestamp": "2025-11-26T10:30:00Z"
            },
            "request_id": "6f1c2a1e-8a0b-4a53-9c57-0c2f4b8e5d11"
        }
    })

    error: ErrorDetail
    request_id: Optional[str] = Field(None, description="Correlates the response with server logs")


class ValidationErrorResponse(ErrorResponse):
    """Malformed request body: one entry per failing field"""
    validation_errors: List[Dict[str, Any]] = Field(description="[{field, message, type}]")
