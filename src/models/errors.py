"""
Domain errors

Raised by the services layer and translated to JSON responses by
api/middleware/error_handler.py.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
        status_code: int = 400
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)


class UnknownConfigFieldError(DomainError):
    """Partial update names a field the configuration record doesn't have"""
    def __init__(self, fields: list):
        super().__init__(
            code="UNKNOWN_CONFIG_FIELD",
            message=f"Unknown configuration field(s): {', '.join(fields)}",
            details={"fields": fields},
            status_code=422
        )


class InvalidConfigValueError(DomainError):
    """Value can't be coerced into the field's type"""
    def __init__(self, field: str, value, reason: str):
        super().__init__(
            code="INVALID_CONFIG_VALUE",
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": repr(value)},
            status_code=422
        )


class UnknownPresetError(DomainError):
    """Color preset name doesn't exist in colors.yaml"""
    def __init__(self, name: str, valid_names: list):
        super().__init__(
            code="UNKNOWN_PRESET",
            message=f"Color preset '{name}' not found",
            details={"name": name, "valid_names": valid_names},
            status_code=404
        )
