"""
Decorators for AWS error wrapping and Lambda handler responses.
"""
import functools
import uuid
from typing import Callable, Any, Dict

from botocore.exceptions import BotoCoreError, ClientError

from awsimaging.logger_config import get_logger
from awsimaging.utils.exceptions import (
    ConfigurationError,
    RemoteServiceError,
    ValidationError,
)

logger = get_logger(__name__)


def remote_call(service: str, operation: str) -> Callable:
    """
    Decorator that wraps botocore failures in RemoteServiceError.

    The original exception is chained so callers can still inspect it.
    Nothing is retried here.

    Args:
        service: AWS service name used in the error context
        operation: API operation name used in the error context

    Returns:
        Decorator
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ClientError as e:
                error_code = e.response.get('Error', {}).get('Code')
                logger.error(f'{service} {operation} failed with {error_code}: {str(e)}')
                raise RemoteServiceError(
                    f'{service} {operation} failed: {str(e)}',
                    service=service,
                    operation=operation,
                    error_code=error_code
                ) from e
            except BotoCoreError as e:
                logger.error(f'{service} {operation} failed: {str(e)}')
                raise RemoteServiceError(
                    f'{service} {operation} failed: {str(e)}',
                    service=service,
                    operation=operation
                ) from e
        return wrapper
    return decorator


def _error_response(
    error_type: str,
    error: Exception,
    correlation_id: str,
    handler: str
) -> Dict[str, Any]:
    return {
        "error": {
            "type": error_type,
            "message": str(error),
            "correlation_id": correlation_id
        },
        "metadata": {
            "correlation_id": correlation_id,
            "handler": handler
        }
    }


def lambda_handler(
    func: Callable[[Any, Any], Any]
) -> Callable[[Any, Any], Dict[str, Any]]:
    """
    Decorator for Lambda handler functions.

    Provides:
    - Structured error responses keyed by error type
    - Request correlation IDs for logging
    - Response metadata

    Args:
        func: The handler function to decorate

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(event: Any, context: Any) -> Dict[str, Any]:
        correlation_id = str(uuid.uuid4())

        logger.info(
            f"Handler {func.__name__} invoked",
            extra={
                "correlation_id": correlation_id,
                "handler": func.__name__,
                "request_id": getattr(context, "aws_request_id", None) if context else None
            }
        )

        try:
            result = func(event, context)

            if not isinstance(result, dict):
                result = {"result": result}

            result.setdefault("metadata", {})
            result["metadata"]["correlation_id"] = correlation_id

            logger.info(
                f"Handler {func.__name__} completed successfully",
                extra={"correlation_id": correlation_id}
            )
            return result

        except (ValidationError, ValueError) as e:
            logger.warning(
                f"Handler {func.__name__} validation error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response("ValidationError", e, correlation_id, func.__name__)

        except ConfigurationError as e:
            logger.error(
                f"Handler {func.__name__} configuration error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response("ConfigurationError", e, correlation_id, func.__name__)

        except RemoteServiceError as e:
            logger.error(
                f"Handler {func.__name__} remote service error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response("RemoteServiceError", e, correlation_id, func.__name__)

        except Exception as e:
            logger.error(
                f"Handler {func.__name__} failed: {str(e)}",
                extra={"correlation_id": correlation_id},
                exc_info=True
            )
            return _error_response(type(e).__name__, e, correlation_id, func.__name__)

    return wrapper
