"""
Base service types shared by the sales services
"""

from dataclasses import dataclass
from typing import Any, Optional

from models.enums import ErrorType

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None

    @classmethod
    def ok(cls, data: Any = None) -> "ServiceResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error_type: ErrorType, error: str) -> "ServiceResult":
        return cls(success=False, error=error, error_type=error_type)

def not_found(resource: str, resource_id: Any) -> ServiceResult:
    return ServiceResult.fail(ErrorType.NOT_FOUND, f"{resource} {resource_id} not found")

def invalid_reference(field: str, value: Any) -> ServiceResult:
    return ServiceResult.fail(ErrorType.INVALID_REFERENCE, f"Invalid {field}: {value}")

def id_mismatch(path_id: Any, body_id: Any) -> ServiceResult:
    return ServiceResult.fail(
        ErrorType.BAD_REQUEST,
        f"Path id {path_id} does not match body id {body_id}"
    )
