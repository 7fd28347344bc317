"""
Custom exception classes for session setup, input validation and AWS calls.
"""
from typing import Optional, Any


class ConfigurationError(Exception):
    """Exception raised for missing or invalid region/credential configuration."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None
    ):
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Name of the offending setting if available
        """
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(Exception):
    """Exception raised for malformed local input."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None
    ):
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation if available
            value: Invalid value if available (never image payloads)
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class RemoteServiceError(Exception):
    """Exception raised when an AWS service call fails."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize remote service error.

        Args:
            message: Error message
            service: AWS service name (e.g. 'rekognition')
            operation: API operation name (e.g. 'DetectLabels')
            error_code: AWS error code if the service returned one
        """
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.error_code = error_code
