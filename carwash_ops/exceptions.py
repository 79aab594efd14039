"""
Car Wash Ops Exceptions

Exception classes raised by the remote data adapter and the entity stores.
"""

from typing import Any, Optional


class CarwashOpsError(Exception):
    """Base exception for carwash_ops errors"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "")
        self.message = message


class ConfigError(CarwashOpsError):
    """Exception for missing or invalid configuration"""
    pass


class DataServiceError(CarwashOpsError):
    """Exception for failures reported by the remote data service"""

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None,
                 details: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class EntityOperationError(CarwashOpsError):
    """Exception for a failed add/update/delete on an entity store"""

    def __init__(self, message: str, operation: str, entity: str,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.operation = operation
        self.entity = entity
        self.cause = cause

    @classmethod
    def wrap(cls, operation: str, entity: str, cause: BaseException) -> "EntityOperationError":
        """
        Build the caller-facing error for a failed write

        The message is "Failed to <operation> <entity>", followed by the
        store's own message when it supplied one.
        """
        fallback = f"Failed to {operation} {entity}"
        detail = getattr(cause, "message", None)
        if detail is None and not isinstance(cause, CarwashOpsError):
            detail = str(cause)
        message = f"{fallback}: {detail}" if detail else fallback
        return cls(message, operation=operation, entity=entity, cause=cause)
