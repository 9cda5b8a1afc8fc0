from enum import Enum
from typing import Dict, Optional, Union


class ErrorCode(Enum):
    """Error codes surfaced by the service layer."""

    NOT_FOUND = "NOT_FOUND"
    HTTP_ERROR = "HTTP_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"


class PromptNexusError(Exception):
    """Base class for all Prompt Nexus client errors."""

    def __init__(self, message: str, code: Optional[ErrorCode] = None, details: Optional[Union[Dict, str, object]] = None):
        if details is None:
            details = {}
        self.message = message
        self.code = code
        self.details = details
        super().__init__(message)


class ApiError(PromptNexusError):
    def __init__(self, message: str, code: Optional[ErrorCode] = None, status_code: Optional[int] = None, details=None):
        self.status_code = status_code
        super().__init__(message, code=code, details=details)


class AuthError(PromptNexusError):
    pass
