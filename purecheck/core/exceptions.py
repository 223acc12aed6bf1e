from typing import Dict, Any, Optional
import logging
import traceback
import sys
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Error codes"""

    # System (1000-1999)
    SYSTEM_ERROR = "SYS_1000"
    CONFIGURATION_ERROR = "SYS_1001"
    REFERENCE_DATA_ERROR = "SYS_1002"

    # External model (4000-4999)
    EXTERNAL_SERVICE_ERROR = "AI_4000"
    MALFORMED_EXTERNAL_RESULT = "AI_4001"
    RATE_LIMITED = "AI_4002"


class PureCheckException(Exception):
    """Base exception"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        user_message: Optional[str] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause
        self.user_message = user_message or message
        self.traceback = traceback.format_exc()

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Exception as a response dictionary"""
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
            "traceback": self.traceback if sys.exc_info()[0] else None
        }


class ConfigurationError(PureCheckException):
    """Invalid or incomplete configuration"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details,
            user_message="The analysis service is not configured correctly."
        )


class ReferenceDataError(PureCheckException):
    """Reference data file could not be loaded"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(
            message=message,
            error_code=ErrorCode.REFERENCE_DATA_ERROR,
            details=details,
            cause=cause,
            user_message="Ingredient reference data is unavailable."
        )


class ExternalServiceError(PureCheckException):
    """External classification service unreachable or returned an error"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.EXTERNAL_SERVICE_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        user_message = "Analysis timeout. Please check your internet connection."
        if error_code == ErrorCode.RATE_LIMITED:
            user_message = "Too many requests. Please try again in a moment."
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            cause=cause,
            user_message=user_message
        )


class MalformedExternalResultError(PureCheckException):
    """External classification result failed JSON parsing or schema validation"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(
            message=message,
            error_code=ErrorCode.MALFORMED_EXTERNAL_RESULT,
            details=details,
            cause=cause,
            user_message="Analysis failed. Please try a clearer text input."
        )


def http_status_for(exception: PureCheckException) -> int:
    """HTTP status code for an exception"""
    if exception.error_code == ErrorCode.RATE_LIMITED:
        return 429
    if exception.error_code in (ErrorCode.EXTERNAL_SERVICE_ERROR, ErrorCode.MALFORMED_EXTERNAL_RESULT):
        return 502
    return 500


def global_error_handler(exception: Exception) -> Dict[str, Any]:
    """Global error handler"""
    if isinstance(exception, PureCheckException):
        return {
            "error": True,
            "code": exception.error_code.value,
            "message": exception.user_message,
            "details": exception.details
        }
    else:
        logger.error(f"Unexpected error: {exception}")
        logger.error(traceback.format_exc())
        return {
            "error": True,
            "code": ErrorCode.SYSTEM_ERROR.value,
            "message": "Internal server error occurred",
            "details": {"error": str(exception)}
        }
